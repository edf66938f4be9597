"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

curve25519 from RFC 7748 section 4.1, as a group with full (u, v)
coordinates. S is the constant of the complete addition law.
"""

Name = "curve25519"
Model = "montgomery"
P = 2 ** 255 - 19
A = 486662
B = 1
S = 1
R = 7237005577332262213973186563042994240857116359379907606001950938285454250989
H = 8
Gx = 9
Gy = 43114425171068552920764898935933967039370386198203806730763910166200978582548
