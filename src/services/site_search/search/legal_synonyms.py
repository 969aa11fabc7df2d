"""
Hand-curated legal synonym dictionary used for query expansion.
Keys are single normalized words; values are the alternate words or phrases
a searcher might mean instead.
"""

from typing import Dict, List

LEGAL_SYNONYMS: Dict[str, List[str]] = {
    'dui': ['dwi', 'drunk driving', 'driving under the influence', 'owi', 'oui', 'impaired driving'],
    'dwi': ['dui', 'drunk driving', 'driving while intoxicated', 'owi', 'oui', 'impaired driving'],
    'assault': ['battery', 'attack', 'physical harm'],
    'battery': ['assault', 'attack', 'physical contact'],
    'theft': ['larceny', 'stealing', 'robbery', 'burglary'],
    'larceny': ['theft', 'stealing', 'robbery'],
    'robbery': ['theft', 'mugging', 'holdup'],
    'burglary': ['breaking and entering', 'b&e', 'home invasion'],
    'marijuana': ['cannabis', 'weed', 'pot', 'marihuana'],
    'drug': ['controlled substance', 'narcotic', 'illegal substance'],
    'expungement': ['expunction', 'record clearing', 'record sealing', 'dismissal'],
    'bail': ['bond', 'release', 'bail bond'],
    'arraignment': ['first appearance', 'initial appearance'],
    'plea': ['guilty plea', 'not guilty', 'plea bargain', 'plea deal'],
    'probation': ['supervised release', 'community supervision'],
    'parole': ['early release', 'supervised release'],
    'felony': ['serious crime', 'major offense'],
    'misdemeanor': ['minor offense', 'petty crime'],
    'attorney': ['lawyer', 'counsel', 'legal representation', 'public defender'],
    'lawyer': ['attorney', 'counsel', 'legal representation'],
    'warrant': ['arrest warrant', 'bench warrant', 'search warrant'],
    'miranda': ['miranda rights', 'right to remain silent', 'miranda warning'],
    'diversion': ['diversion program', 'alternative sentencing', 'pretrial diversion'],
    'immigration': ['deportation', 'removal', 'ice', 'immigration enforcement'],
    'deportation': ['removal', 'immigration', 'ice detention'],
}
