from .profile_analyzer import ProfileAnalyzer, resolve_leaf
from .hotspot_analyzer import HotspotAnalyzer, HotspotResult, top_hotspots, top_stacks

__all__ = ["ProfileAnalyzer", "resolve_leaf", "HotspotAnalyzer", "HotspotResult", "top_hotspots", "top_stacks"]
