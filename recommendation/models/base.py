# Re-export the main Base class from db.py so recommendation tables share
# the metadata main.py creates at startup
from db import Base

__all__ = ["Base"]
