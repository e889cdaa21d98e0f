"""
Error taxonomy for the hydra engine.
"""


class HydraError(Exception):
    """Base class for all hydra engine errors."""


class InvalidTarget(HydraError):
    """A cut was requested on the root, an internal node, or a node outside the tree."""


class ResourceExhaustion(HydraError):
    """Growth would exceed a resource the caller is not willing to spend."""


class GrowthLimitExceeded(ResourceExhaustion):
    def __init__(self, projected: int, limit: int):
        super().__init__(f"cut would grow the hydra to {projected} nodes (limit {limit})")
        self.projected = projected
        self.limit = limit
