from rscss.naming.classifier import HELPER_LIKE_NAMES, Classification, classify
from rscss.naming.formats import DEFAULT_FORMATS, FormatSpec, Role, Shape, name_matches

__all__ = [
    "Classification",
    "DEFAULT_FORMATS",
    "FormatSpec",
    "HELPER_LIKE_NAMES",
    "Role",
    "Shape",
    "classify",
    "name_matches",
]
