"""asn-rdap: resuelve números de sistema autónomo a nombres de organización vía RDAP."""

__version__ = "0.1.0"
