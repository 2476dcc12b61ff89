"""Allow ``python -m check_es_aggregation``."""
from check_es_aggregation.cli import main

main()
