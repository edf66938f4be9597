"""
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

curve448 from RFC 7748 section 4.2, as a group with full (u, v)
coordinates. S is the constant of the complete addition law.
"""

Name = "curve448"
Model = "montgomery"
P = 2 ** 448 - 2 ** 224 - 1
A = 156326
B = 1
S = 3
R = int(
    "18170968107390172263733095197200113358841034017182951507037254979514"
    "6003961539585716195755291692375963310293709091662304773755859649779"
)
H = 4
Gx = 5
Gy = int(
    "35529392678556817526412750206378333480897639938771427183188089843516"
    "9088786967410002932673765864550910142774147268105838985595290606362"
)
