"""State layer.

The single live :class:`~pystance.state.store.StanceStore` that the panel
edits and the applier reads.
"""

from pystance.state.store import StanceStore

__all__ = ["StanceStore"]
