"""Path addressing exports."""

from .field_paths import child_path, iter_leaf_nodes, leaf_nodes, required_leaf_paths

__all__ = ["child_path", "iter_leaf_nodes", "leaf_nodes", "required_leaf_paths"]
