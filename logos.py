"""Static outlines of the two wallpaper logos, in path mini-language form.

Both outlines are drawn around their own origin; `bounds()` of each parsed sequence
gives the rectangle used for layout.
"""
from functools import cache

from path import CommandSequence

LOGO_A_PATH = """
    M19.42,22.989 C19.42,94.112 78.39,146.137 153.31,146.137 C228.22,146.137 287.26,94.112
    287.26,22.989 L287.26,-140.41371 L214.72,-140.41371 L214.72,14.565 C214.72,52.956
    188.1,78.808 153.11,78.808 C118.13,78.808 91.51,53.085 91.51,14.565 L91.51,-140.41371
    L18.97,-140.41371 L19.42,22.989 Z
    M481.08,-75.0139 L567.63,-75.0139 L567.63,140.735 L640.17,140.735 L640.17,-75.0139
    L726.73,-75.0139 L726.73,-140.54236 L481.08,-140.54236 L481.08,-75.0139 Z
    M434.2,-140.54236 L361.66,-140.54236 L361.66,140.735 L434.2,140.735 L434.2,-140.54236 Z
    M-273.63,-75.0139 L-187.07,-75.0139 L-187.07,140.735 L-114.53,140.735 L-114.53,-75.0139
    L-28.04,-75.0139 L-28.04,-140.54236 L-273.63,-140.54236 L-273.63,-75.0139 Z
    M-654.19,-140.54236 L-726.73,-140.54236 L-726.73,140.735 L-654.19,140.735
    L-654.19,-140.54236 Z
    M-311.82,-23.054 C-311.82,-94.1773 -370.79,-146.137 -445.77,-146.137 C-520.76,-146.137
    -579.73,-94.1773 -579.73,-23.054 L-579.73,140.735 L-507.19,140.735 L-507.19,-14.244
    C-507.19,-52.6352 -480.56,-78.4865 -445.58,-78.4865 C-410.6,-78.4865 -383.98,-52.7638
    -383.98,-14.244 L-383.98,140.735 L-311.44,140.735 L-311.89,-23.054 L-311.82,-23.054 Z
"""

LOGO_B_PATH = """
    M-0.00002,-300.00004 C-165.6,-300.00004 -300,-165.6 -300,0 C-300,165.6 -165.60002,300.00004
    -0.00002,300 C165.59998,300 300,165.60004 300,0 C300,-165.60002 165.59998,-300.00004
    -0.00002,-300.00004 Z
    M-14.15818,-275.12756 C-13.98938,-275.13612 -13.81684,-275.11932 -13.64798,-275.12756
    L-12.37246,-254.78318 C-29.67578,-253.95822 -46.51714,-251.43484 -62.75512,-247.32144
    L-57.71684,-227.48724 C-100.33878,-216.69132 -138.30224,-194.24584 -168.04848,-163.71174
    L-182.65308,-177.99744 C-194.5313,-165.81148 -205.15082,-152.4257 -214.41326,-138.07398
    L-231.5051,-149.36226 C-184.82412,-221.53956 -105.30972,-270.50214 -14.15818,-275.12756 Z
    M13.64794,-275.12756 C105.01142,-270.65828 184.73768,-221.67324 231.5051,-149.36226
    L214.41326,-138.07398 C205.17164,-152.38956 194.56188,-165.77322 182.71682,-177.93368
    L168.11224,-163.71174 C138.36136,-194.26214 100.35364,-216.68758 57.71684,-227.48724
    L62.7551,-247.32144 C46.51712,-251.43484 29.67578,-253.95822 12.37244,-254.78318
    L13.64794,-275.12756 Z
    M-0.00002,-185.2041 C8.67346,-185.22398 17.34696,-184.6939 24.4898,-183.67346
    L13.32908,-90.81632 C36.78854,-87.3954 57.35694,-75.11752 71.55612,-57.46174
    L146.0459,-113.3291 C155.094,-102.0573 165.35162,-84.37434 170.72704,-70.98214
    L85.1403,-34.37502 C89.4422,-23.74656 91.83674,-12.16502 91.83674,0 C91.83674,11.7196
    89.65798,22.9187 85.6505,33.22704 L170.5357,69.51532 C165.29812,82.98706 155.1475,100.63846
    146.23724,111.9898 L72.25764,56.63266 C58.07734,74.69176 37.2734,87.30264 13.52038,90.81632
    L24.4898,182.14286 C10.20408,184.34284 -10.20408,184.31126 -24.4898,182.27042
    L-13.52042,90.81632 C-37.29058,87.3001 -58.07668,74.6489 -72.25766,56.56888
    L-146.04592,111.92602 C-155.094,100.65422 -165.35162,82.97126 -170.72706,69.57908
    L-85.65052,33.16326 C-89.64436,22.8702 -91.83674,11.6986 -91.83674,0 C-91.83674,-12.18602
    -89.45636,-23.79538 -85.14032,-34.43878 L-170.53572,-70.91838 C-165.29812,-84.39012
    -155.14752,-102.04152 -146.23724,-113.39288 L-71.55614,-57.46174 C-57.35696,-75.11752
    -36.78856,-87.3954 -13.32908,-90.81632 L-24.4898,-183.54594 C-17.34694,-184.64592
    -8.67348,-185.1842 -0.00002,-185.2041 Z
    M-245.15306,-125.7653 L-226.78572,-116.70918 C-234.53246,-101.69084 -240.86626,-85.83456
    -245.53572,-69.26022 L-225.89286,-63.71174 C-231.60334,-43.44648 -234.69388,-22.08362
    -234.69388,0 C-234.69388,22.10504 -231.61406,43.49278 -225.89286,63.7755
    L-245.53572,69.32398 C-240.86948,85.87164 -234.52294,101.71394 -226.78572,116.70918
    L-245.15306,125.7653 C-264.55124,88.05396 -275.5102,45.30082 -275.5102,0
    C-275.5102,-45.30084 -264.55124,-88.05396 -245.15306,-125.7653 Z
    M245.15306,-125.7653 C264.55124,-88.05396 275.51016,-45.30084 275.51016,0
    C275.51016,45.30082 264.55124,88.05396 245.15306,125.7653 L226.7857,116.70918
    C234.5262,101.70948 240.86794,85.87704 245.53572,69.32398 L225.89286,63.7755
    C231.61404,43.49278 234.69388,22.10504 234.69388,0 C234.69388,-22.08362 231.60336,-43.44648
    225.89286,-63.71174 L245.53572,-69.26022 C240.86756,-85.82992 234.52926,-101.69444
    226.7857,-116.70918 L245.15306,-125.7653 Z
    M-214.41326,138.074 C-205.14728,152.42544 -194.53182,165.81092 -182.65308,177.99746
    L-168.04848,163.71174 C-138.30224,194.24582 -100.33878,216.69134 -57.71684,227.48726
    L-62.75512,247.32142 C-46.51714,251.4348 -29.67578,253.95822 -12.37246,254.78318
    L-13.64798,275.12756 C-105.01142,270.65824 -184.7377,221.6732 -231.5051,149.36226
    L-214.41326,138.074 Z
    M214.47704,138.074 L231.5051,149.36226 C184.73768,221.6732 105.01142,270.65824
    13.64794,275.12756 L12.37244,254.78318 C29.67578,253.95822 46.51712,251.4348
    62.7551,247.32142 L57.71684,227.48726 C100.35364,216.68756 138.36136,194.26212
    168.11224,163.71174 L182.71682,177.93368 C194.5767,165.758 205.22412,152.40892
    214.47704,138.074
"""


@cache
def logo_a() -> CommandSequence:
    return CommandSequence.parse(LOGO_A_PATH, strict=True)


@cache
def logo_b() -> CommandSequence:
    return CommandSequence.parse(LOGO_B_PATH, strict=True)
