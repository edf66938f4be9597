"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

The G1 group of the BLS12-381 pairing-friendly curve, y^2 = x^3 + 4 over the
381-bit base field. HEff is the effective cofactor 1 - z of RFC 9380 section
8.8.1, with z = -0xd201000000010000 the curve seed.
"""

Name = "BLS12381G1"
Model = "weierstrass"
P = int(
    "40024095552216673934177898257359041565568828199390078853320581361240"
    "31650490837864442687629129015664037894272559787"
)
A = 0
B = 4
R = 52435875175126190479447740508185965837690552500527637822603658699938581184513
H = 0x396C8C005555E1568C00AAAB0000AAAB
HEff = 0xD201000000010001
Gx = int(
    "17F1D3A73197D7942695638C4FA9AC0FC3688C4F9774B905A14E3A3F171BAC58"
    "6C55E83FF97A1AEFFB3AF00ADB22C6BB",
    16,
)
Gy = int(
    "08B3F481E3AAA0F1A09E30ED741D8AE4FCF5E095D5D00AF600DB18CB2C04B3ED"
    "D03CC744A2888AE40CAA232946C5E7E1",
    16,
)
