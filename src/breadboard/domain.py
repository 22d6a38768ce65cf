"""Domain initialization and configuration.

A single protean domain hosts the catalogue, identity and ordering contexts
so that cart and order handlers can read products, users and addresses
inside the same unit of work.
"""

from protean.domain import Domain

from breadboard.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
breadboard = Domain(name="breadboard")

# Upper bound for "fetch everything" repository queries
FETCH_LIMIT = 10_000
