"""
Data exporters to convert engine snapshots into renderer-friendly format.
Keeps rendering module decoupled from the engine.
"""

import json
from pathlib import Path
from typing import List, Dict, Any


def snapshot_to_dict(snapshot) -> Dict[str, Any]:
    """
    Flatten a HydraSnapshot.

    Format:
    {
        "move_count": int,
        "node_count": int,
        "slain": bool,
        "policy": str,
        "bounds": [xmin, ymin, xmax, ymax],
        "nodes": [
            {
                "label": int,      # pre-order rank in this snapshot only
                "parent": int | null,
                "depth": int,
                "x": float,
                "y": float,
                "is_leaf": bool,
                "is_root": bool,
                "children": int
            }
        ]
    }
    """
    nodes = [
        {
            "label": v.label,
            "parent": v.parent_label,
            "depth": v.depth,
            "x": float(v.x),
            "y": float(v.y),
            "is_leaf": v.is_leaf,
            "is_root": v.is_root,
            "children": v.child_count,
        }
        for v in snapshot.nodes
    ]
    return {
        "move_count": snapshot.move_count,
        "node_count": snapshot.node_count,
        "slain": snapshot.slain,
        "policy": snapshot.policy,
        "bounds": [float(b) for b in snapshot.bounds],
        "nodes": nodes,
    }


def export_snapshot(snapshot, output_path: str) -> Dict[str, Any]:
    data = snapshot_to_dict(snapshot)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    return data


def export_frames(frames: List[Dict[str, Any]], output_path: str) -> int:
    """Write a list of snapshot dicts (one per move) as a replay file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump({"num_frames": len(frames), "frames": frames}, f)

    print(f"Exported {len(frames)} frames to {output_path}")
    return len(frames)


def load_snapshot(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)


def load_frames(path: str) -> List[Dict[str, Any]]:
    with open(path, 'r') as f:
        return json.load(f)["frames"]
