"""On-screen stance panel.

Kept free of imports: :mod:`pystance.host` and :mod:`pystance.config`
import :mod:`pystance.panel.input` while the controller imports both.
"""
