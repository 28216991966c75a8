"""NJ TRANSIT rail stations and their DepartureVision codes.

The first entry of a code is its canonical name; later entries with the
same code are destination labels the boards print for that station.
"""

STATIONS: tuple[tuple[str, str], ...] = (
    ("Absecon", "AB"),
    ("Allendale", "AZ"),
    ("Allenhurst", "AH"),
    ("Anderson Street", "AS"),
    ("Annandale", "AN"),
    ("Asbury Park", "AP"),
    ("Atco", "AO"),
    ("Atlantic City Rail Terminal", "AC"),
    ("Avenel", "AV"),
    ("Basking Ridge", "BI"),
    ("Bay Head", "BH"),
    ("Bay Street", "MC"),
    ("Belmar", "BS"),
    ("Berkeley Heights", "BY"),
    ("Bernardsville", "BV"),
    ("Bloomfield", "BM"),
    ("Boonton", "BN"),
    ("Bound Brook", "BK"),
    ("Bradley Beach", "BB"),
    ("Brick Church", "BU"),
    ("Bridgewater", "BW"),
    ("Broadway Fair Lawn", "BF"),
    ("Campbell Hall", "CB"),
    ("Chatham", "CM"),
    ("Cherry Hill", "CY"),
    ("Clifton", "IF"),
    ("Convent Station", "CN"),
    ("Cranford", "XC"),
    ("Delawanna", "DL"),
    ("Denville", "DV"),
    ("Dover", "DO"),
    ("Dunellen", "DN"),
    ("East Orange", "EO"),
    ("Edison", "ED"),
    ("Egg Harbor City", "EH"),
    ("Elberon", "EL"),
    ("Elizabeth", "EZ"),
    ("Emerson", "EN"),
    ("Essex Street", "EX"),
    ("Fanwood", "FW"),
    ("Far Hills", "FH"),
    ("Garfield", "GD"),
    ("Garwood", "GW"),
    ("Gillette", "GI"),
    ("Gladstone", "GL"),
    ("Glen Ridge", "GG"),
    ("Glen Rock Boro Hall", "GK"),
    ("Glen Rock Main Line", "RS"),
    ("Hackettstown", "HQ"),
    ("Hamilton", "HL"),
    ("Hammonton", "HN"),
    ("Harriman", "HR"),
    ("Hawthorne", "HW"),
    ("Hazlet", "HZ"),
    ("High Bridge", "HG"),
    ("Highland Avenue", "HI"),
    ("Hillsdale", "HD"),
    ("Ho-Ho-Kus", "UF"),
    ("Hoboken", "HB"),
    ("Jersey Avenue", "JA"),
    ("Kingsland", "KG"),
    ("Lake Hopatcong", "HP"),
    ("Lebanon", "ON"),
    ("Lincoln Park", "LP"),
    ("Linden", "LI"),
    ("Lindenwold", "LW"),
    ("Little Falls", "FA"),
    ("Little Silver", "LS"),
    ("Long Branch", "LB"),
    ("Lyndhurst", "LN"),
    ("Lyons", "LY"),
    ("Madison", "MA"),
    ("Mahwah", "MZ"),
    ("Manasquan", "SQ"),
    ("Maplewood", "MW"),
    ("Metropark", "MP"),
    ("Metuchen", "MU"),
    ("Middletown NJ", "MI"),
    ("Middletown NY", "MD"),
    ("Millburn", "MB"),
    ("Millington", "GO"),
    ("Monmouth Park", "MK"),
    ("Montclair State U", "UV"),
    ("Morris Plains", "MX"),
    ("Morristown", "MR"),
    ("Mountain Lakes", "ML"),
    ("Mountain Station", "MT"),
    ("Murray Hill", "MH"),
    ("Netherwood", "NE"),
    ("New Bridge Landing", "NH"),
    ("New Brunswick", "NB"),
    ("New Providence", "NV"),
    ("New York Penn Station", "NY"),
    ("Newark Airport", "NA"),
    ("Newark Broad Street", "ND"),
    ("Newark Penn Station", "NP"),
    ("North Branch", "OR"),
    ("North Elizabeth", "NZ"),
    ("Oradell", "OD"),
    ("Orange", "OG"),
    ("Otisville", "OS"),
    ("Park Ridge", "PV"),
    ("Passaic", "PS"),
    ("Paterson", "RN"),
    ("Peapack", "PC"),
    ("Pearl River", "PQ"),
    ("Perth Amboy", "PE"),
    ("Philadelphia", "PH"),
    ("Plainfield", "PF"),
    ("Plauderville", "PL"),
    ("Point Pleasant Beach", "PP"),
    ("Port Jervis", "PO"),
    ("Princeton", "PR"),
    ("Princeton Junction", "PJ"),
    ("Radburn Fair Lawn", "FZ"),
    ("Rahway", "RH"),
    ("Ramsey Main St", "RY"),
    ("Ramsey Route 17", "17"),
    ("Raritan", "RA"),
    ("Red Bank", "RB"),
    ("Ridgewood", "RW"),
    ("River Edge", "RG"),
    ("Roselle Park", "RL"),
    ("Rutherford", "RF"),
    ("Salisbury Mills-Cornwall", "CW"),
    ("Secaucus Lower Lvl", "TS"),
    ("Secaucus Upper Lvl", "SE"),
    ("Short Hills", "RT"),
    ("Sloatsburg", "XG"),
    ("Somerville", "SM"),
    ("South Amboy", "CH"),
    ("South Orange", "SO"),
    ("Spring Lake", "LA"),
    ("Spring Valley", "SV"),
    ("Stirling", "SG"),
    ("Suffern", "SF"),
    ("Summit", "ST"),
    ("Teterboro", "TE"),
    ("Towaco", "TO"),
    ("Trenton", "TR"),
    ("Tuxedo", "TC"),
    ("Union", "US"),
    ("Waldwick", "WK"),
    ("Walnut Street", "WA"),
    ("Watchung Avenue", "WG"),
    ("Watsessing Avenue", "WT"),
    ("Wesmont", "WM"),
    ("Westfield", "WF"),
    ("Westwood", "WW"),
    ("White House", "WH"),
    ("Wood Ridge", "WR"),
    ("Woodbridge", "WB"),
    ("Woodcliff Lake", "WL"),
    # Destination labels printed on the boards
    ("New York", "NY"),
    ("New York (SEC)", "NY"),
    ("Hoboken (SEC)", "HB"),
    ("Newark", "NP"),
    ("Secaucus", "SE"),
    ("Atlantic City", "AC"),
    ("MSU", "UV"),
)
