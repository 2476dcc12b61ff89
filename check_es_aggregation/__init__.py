"""
Monitoring plugin checking an Elasticsearch aggregation against thresholds.
"""

__version__ = "1.0.0"
