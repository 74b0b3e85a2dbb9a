"""
Static jurisdiction tables: request codes → AustLII path segments,
and court abbreviations → jurisdiction codes.
"""

# Request jurisdiction code → AustLII path segment under au/cases or au/legis.
# Federal courts (HCA, FCA, FCAFC, ...) live under au/cases/cth/.
JURISDICTION_PATH_SEGMENTS: dict[str, str] = {
    "cth": "cth",
    "vic": "vic",
    "nsw": "nsw",
    "qld": "qld",
    "sa": "sa",
    "wa": "wa",
    "tas": "tas",
    "nt": "nt",
    "act": "act",
    "federal": "cth",
}

# New Zealand material sits under its own nz/ prefix rather than au/.
NZ_JURISDICTION = "nz"

# Court abbreviation (as it appears in a neutral citation) → jurisdiction code
COURT_TO_JURISDICTION: dict[str, str] = {
    "HCA": "cth",
    "FCAFC": "cth",
    "FCA": "cth",
    "AATA": "cth",
    "NSWSC": "nsw",
    "NSWCA": "nsw",
    "NSWCCA": "nsw",
    "NSWDC": "nsw",
    "NSWLEC": "nsw",
    "VSC": "vic",
    "VSCA": "vic",
    "VCC": "vic",
    "QSC": "qld",
    "QCA": "qld",
    "QDC": "qld",
    "SASC": "sa",
    "SASCFC": "sa",
    "SADC": "sa",
    "WASC": "wa",
    "WASCA": "wa",
    "WADC": "wa",
    "TASSC": "tas",
    "TASFC": "tas",
    "NTSC": "nt",
    "NTCA": "nt",
    "ACTSC": "act",
    "ACTCA": "act",
    "NZHC": "nz",
    "NZCA": "nz",
    "NZSC": "nz",
}
