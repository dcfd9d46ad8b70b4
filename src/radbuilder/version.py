"""
Central version constants for radbuilder.
"""

__version__ = "0.4.0"

# Schema version of the persisted project document (independent of the tool version)
DOCUMENT_VERSION = "1"
