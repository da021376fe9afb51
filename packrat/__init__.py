"""packrat - slot inventories with stacking items and equippable bags."""

__version__ = "0.1.0"
