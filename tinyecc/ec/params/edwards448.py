"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

edwards448 from RFC 8032 section 5.2, x^2 + y^2 = 1 - 39081x^2y^2.
"""

Name = "edwards448"
Model = "edwards"
P = 2 ** 448 - 2 ** 224 - 1
A = 1
D = -39081
R = int(
    "3FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF7CCA23E9"
    "C44EDB49AED63690216CC2728DC58F552378C292AB5844F3",
    16,
)
H = 4
Gx = int(
    "4F1970C66BED0DED221D15A622BF36DA9E146570470F1767EA6DE324A3D3A464"
    "12AE1AF72AB66511433B80E18B00938E2626A82BC70CC05E",
    16,
)
Gy = int(
    "693F46716EB6BC248876203756C9C7624BEA73736CA3984087789C1E05A0C2D7"
    "3AD3FF1CE67C39C4FDBD132C4ED7C8AD9808795BF230FA14",
    16,
)
