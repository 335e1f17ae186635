"""backend.services – optional remote collaborators (IPFS, database, geocoding)."""
from .database import DatabaseService
from .ipfs import IPFSService
from .location import LocationService

__all__ = ["DatabaseService", "IPFSService", "LocationService"]
