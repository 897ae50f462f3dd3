"""E24 0402 thick-film resistors stocked by LCSC, 10k to 150k."""

from __future__ import annotations

from .models import ResistorCatalog

RESISTOR_TO_0402_LCSC = {
    10000: "C25744",
    11000: "C25749",
    12000: "C25752",
    13000: "C25754",
    15000: "C25756",
    16000: "C25759",
    18000: "C25762",
    20000: "C25765",
    22000: "C25768",
    24000: "C25769",
    27000: "C25771",
    30000: "C25776",
    33000: "C25779",
    36000: "C43676",
    39000: "C25783",
    43000: "C8329",
    47000: "C25563",
    51000: "C25794",
    56000: "C25796",
    62000: "C37825",
    68000: "C36871",
    75000: "C25798",
    82000: "C4142",
    91000: "C4147",
    100000: "C25741",
    110000: "C25745",
    120000: "C25750",
    130000: "C52929",
    150000: "C25755",
}

LCSC_0402_CATALOG = ResistorCatalog(RESISTOR_TO_0402_LCSC)
