'''
module hotspot analyzer
'''

from typing import Dict, List, Optional, Tuple
from ...flow.flow import FlowNode
from ...perf_data_struct.dynamic.profile.perf_data import CollapsedProfile
from ...perf_data_struct.dynamic.profile.sample_data import StackSample
from ...utils.report_config import DEFAULT_TOP_N


def top_hotspots(self_samples: Dict[str, int], top_n: int) -> List[Tuple[str, int]]:
    """
    Rank leaf frames by self samples.

    Args:
        self_samples: Leaf frame name -> samples, in first-seen order
        top_n: Number of entries to keep; <= 0 keeps all of them

    Returns:
        (frame, samples) pairs, heaviest first, first-seen first among equals
    """
    ranked = sorted(self_samples.items(), key=lambda x: x[1], reverse=True)
    if top_n <= 0 or top_n >= len(ranked):
        return ranked
    return ranked[:top_n]


def top_stacks(stacks: List[StackSample], top_n: int) -> List[StackSample]:
    """
    Rank individual stack samples by sample count.

    Identical stack text on separate input lines stays separate.

    Args:
        stacks: Samples in input order
        top_n: Number of entries to keep; <= 0 keeps all of them

    Returns:
        Samples, heaviest first, earlier lines first among equals
    """
    ranked = sorted(stacks, key=lambda s: s.getSamples(), reverse=True)
    if top_n <= 0 or top_n >= len(ranked):
        return ranked
    return ranked[:top_n]


'''
@class HotspotResult
Ranked view of a CollapsedProfile
'''


class HotspotResult:
    """
    HotspotResult bundles a profile with its rankings.

    Attributes:
        m_profile: The ranked profile
        m_hotspots: Top (frame, self samples) pairs
        m_top_stacks: Top stack samples
        m_top_n: The requested ranking size
    """

    def __init__(self, profile: CollapsedProfile, hotspots: List[Tuple[str, int]],
                 stacks: List[StackSample], top_n: int) -> None:
        self.m_profile: CollapsedProfile = profile
        self.m_hotspots: List[Tuple[str, int]] = hotspots
        self.m_top_stacks: List[StackSample] = stacks
        self.m_top_n: int = top_n

    def getProfile(self) -> CollapsedProfile:
        return self.m_profile

    def getHotspots(self) -> List[Tuple[str, int]]:
        return self.m_hotspots

    def getTopStacks(self) -> List[StackSample]:
        return self.m_top_stacks

    def getTopN(self) -> int:
        return self.m_top_n


'''
@class HotspotAnalyzer
Hotspot analysis ranks the functions and call paths that collected the most samples.
'''


class HotspotAnalyzer(FlowNode):
    """
    HotspotAnalyzer ranks a CollapsedProfile.

    Hotspots are leaf frames ranked by self samples, an approximation of
    self time. Stacks are the individual input stacks ranked by samples.

    Attributes:
        m_profile: Profile to rank
        m_top_n: Number of hotspots and stacks to keep
    """

    def __init__(self, profile: Optional[CollapsedProfile] = None, top_n: int = DEFAULT_TOP_N) -> None:
        """
        Initialize a HotspotAnalyzer.

        Args:
            profile: Optional profile to rank
            top_n: Number of hotspots and stacks to keep
        """
        super().__init__()
        self.m_profile: Optional[CollapsedProfile] = profile
        self.m_top_n: int = top_n

    def setProfile(self, profile: CollapsedProfile) -> None:
        self.m_profile = profile

    def getProfile(self) -> Optional[CollapsedProfile]:
        return self.m_profile

    def getTopN(self) -> int:
        return self.m_top_n

    def getTopHotspots(self) -> List[Tuple[str, int]]:
        """Get the top leaf frames by self samples."""
        if self.m_profile is None:
            return []
        return top_hotspots(self.m_profile.getSelfSamples(), self.m_top_n)

    def getTopStacks(self) -> List[StackSample]:
        """Get the top stacks by samples."""
        if self.m_profile is None:
            return []
        return top_stacks(self.m_profile.getStacks(), self.m_top_n)

    def getHotspotPercentage(self, function_name: str) -> float:
        """
        Calculate the share of all samples spent in a function itself.

        Args:
            function_name: Leaf frame name

        Returns:
            Percentage (0.0 to 100.0), or 0.0 if the function is unknown
        """
        if self.m_profile is None:
            return 0.0
        total = self.m_profile.getTotalSamples()
        if total <= 0:
            return 0.0
        return self.m_profile.getSelfSamples().get(function_name, 0) * 100.0 / total

    def analyze(self) -> HotspotResult:
        """
        Rank the current profile.

        Returns:
            Rankings together with the profile
        """
        profile = self.m_profile if self.m_profile is not None else CollapsedProfile()
        return HotspotResult(profile, self.getTopHotspots(), self.getTopStacks(), self.m_top_n)

    def run(self) -> None:
        """
        Execute hotspot analysis.

        Ranks every CollapsedProfile of the input flow data and outputs
        one HotspotResult per profile.
        """
        for profile in self.m_inputs.get_data_of_type(CollapsedProfile):
            self.setProfile(profile)
            self.m_outputs.add_data(self.analyze())
