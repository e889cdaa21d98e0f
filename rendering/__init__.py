"""
Rendering module for hydra snapshots and replays.

The Cairo renderer lives in rendering.hydra_renderer and needs the `render`
extra (pycairo); the exporters only need the standard library.
"""

from .exporters import (
    snapshot_to_dict,
    export_snapshot,
    export_frames,
    load_snapshot,
    load_frames
)
