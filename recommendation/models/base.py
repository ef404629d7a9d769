# Re-export the main Base class from db.py for recommendation models
# so create_all() in main.py sees every table on one metadata
from db import Base

__all__ = ["Base"]
