# brokeuni_travel/api/cities.py
"""Static list of popular UK day-trip destinations used for instant matching."""

from typing import Iterable, List

POPULAR_CITIES = (
    "Aberdeen",
    "Aberystwyth",
    "Abingdon",
    "Aldeburgh",
    "Alnwick",
    "Alton",
    "Amersham",
    "Andover",
    "Armagh",
    "Arundel",
    "Aylesbury",
    "Aylsham",
    "Bakewell",
    "Bamburgh",
    "Banbury",
    "Bangor (Northern Ireland)",
    "Bangor (Wales)",
    "Barnstaple",
    "Basingstoke",
    "Bath",
    "Beaconsfield",
    "Belfast",
    "Berwick-upon-Tweed",
    "Bexhill",
    "Billericay",
    "Birmingham",
    "Bishop’s Stortford",
    "Bognor Regis",
    "Boston",
    "Bournemouth",
    "Bradford",
    "Brentwood",
    "Bridport",
    "Brighton",
    "Brighton & Hove",
    "Bristol",
    "Broadstairs",
    "Burford",
    "Burnham-on-Sea",
    "Bury St Edmunds",
    "Cambridge",
    "Canterbury",
    "Cardiff",
    "Carlisle",
    "Chelmsford",
    "Chertsey",
    "Chester",
    "Chichester",
    "Chipping Norton",
    "Christchurch",
    "Cirencester",
    "Clacton-on-Sea",
    "Clevedon",
    "Colchester",
    "Coventry",
    "Cromer",
    "Deal",
    "Derby",
    "Didcot",
    "Doncaster",
    "Dorking",
    "Dover",
    "Dundee",
    "Dunfermline",
    "Durham",
    "Eastbourne",
    "Edinburgh",
    "Ely",
    "Epsom",
    "Exeter",
    "Exmouth",
    "Falmouth",
    "Fareham",
    "Farnham",
    "Faversham",
    "Felixstowe",
    "Fishguard",
    "Folkestone",
    "Giant's Causeway",
    "Glasgow",
    "Gloucester",
    "Gosport",
    "Grantham",
    "Great Yarmouth",
    "Guildford",
    "Hadrian's Wall",
    "Harwich",
    "Haslemere",
    "Hastings",
    "Hemel Hempstead",
    "Henley-on-Thames",
    "Hereford",
    "Herne Bay",
    "Hitchin",
    "Holt",
    "Horncastle",
    "Hove",
    "Hunstanton",
    "Ilfracombe",
    "Inverness",
    "Ipswich",
    "Jurassic Coast",
    "Kenilworth",
    "King’s Lynn",
    "Kingston upon Hull",
    "Lake District National Park",
    "Lancaster",
    "Leamington Spa",
    "Leatherhead",
    "Leeds",
    "Leicester",
    "Lewes",
    "Lichfield",
    "Lincoln",
    "Lisburn",
    "Littlehampton",
    "Liverpool",
    "Llandudno",
    "Loch Ness, Inverness",
    "London",
    "Londonderry (Derry)",
    "Loughborough",
    "Louth",
    "Lowestoft",
    "Lyme Regis",
    "Lynmouth",
    "Lynton",
    "Maidenhead",
    "Maidstone",
    "Maldon",
    "Manchester",
    "Margate",
    "Market Harborough",
    "Marlow",
    "Melton Mowbray",
    "Milton Keynes",
    "Minehead",
    "Newbury",
    "Newcastle upon Tyne",
    "Newquay",
    "Newry",
    "Norwich",
    "Nottingham",
    "Oakham",
    "Oxford",
    "Padstow",
    "Peak District National Park",
    "Penrith",
    "Penzance",
    "Perth",
    "Peterborough",
    "Plymouth",
    "Poole",
    "Portsmouth",
    "Preston",
    "Ramsgate",
    "Reading",
    "Reigate",
    "Ripon",
    "Rochford",
    "Rugby",
    "Rye",
    "Saffron Walden",
    "Salcombe",
    "Salford",
    "Salisbury",
    "Scarborough",
    "Seaford",
    "Sevenoaks",
    "Shanklin",
    "Sheffield",
    "Sheringham",
    "Sidmouth",
    "Sittingbourne",
    "Skegness",
    "Skipton",
    "Snowdonia National Park",
    "Southampton",
    "Southend-on-Sea",
    "Southwold",
    "Spalding",
    "St Albans",
    "St Andrews",
    "St Asaph",
    "St Davids",
    "St Ives",
    "Staines",
    "Stamford",
    "Stoke-on-Trent",
    "Stonehenge",
    "Stratford-upon-Avon",
    "Sudbury",
    "Sunderland",
    "Swanage",
    "Swansea",
    "Tenby",
    "The Cotswolds",
    "Thetford",
    "Torquay",
    "Totnes",
    "Tring",
    "Truro",
    "Tunbridge Wells",
    "Tynemouth",
    "Wakefield",
    "Warwick",
    "Watford",
    "Wells",
    "Westminster",
    "Weston-super-Mare",
    "Weymouth",
    "Whitby",
    "Whitstable",
    "Winchester",
    "Windsor",
    "Withernsea",
    "Witney",
    "Woking",
    "Wolverhampton",
    "Woodstock",
    "Worcester",
    "Worthing",
    "Wrexham",
    "Wroxham",
    "York",
)


def filter_cities(query: str, cities: Iterable[str] = POPULAR_CITIES) -> List[str]:
    """Return the cities containing ``query`` (case-insensitive), in list order."""
    needle = query.lower()
    return [city for city in cities if needle in city.lower()]
