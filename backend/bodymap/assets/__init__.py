"""Static body catalogues, one per gender/side combination."""

from bodymap.assets._catalogue import Catalogue, load_catalogue
from bodymap.assets.body_back import body_back
from bodymap.assets.body_female_back import body_female_back
from bodymap.assets.body_female_front import body_female_front
from bodymap.assets.body_front import body_front

__all__ = [
    "Catalogue",
    "load_catalogue",
    "body_back",
    "body_female_back",
    "body_female_front",
    "body_front",
]
