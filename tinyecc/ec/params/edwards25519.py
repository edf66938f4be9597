"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

edwards25519 from RFC 8032 section 5.1, -x^2 + y^2 = 1 + dx^2y^2.
"""

Name = "edwards25519"
Model = "edwards"
P = 2 ** 255 - 19
A = -1
D = 0x52036CEE2B6FFE738CC740797779E89800700A4D4141D8AB75EB4DCA135978A3
R = 2 ** 252 + 27742317777372353535851937790883648493
H = 8
Gx = 15112221349535400772501151409588531511454012693041857206046113283949847762202
Gy = 46316835694926478169428394003475163141307993866256225615783033603165251855960
