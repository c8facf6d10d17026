from .rating_aggregator import recompute_aggregate as recompute_aggregate
