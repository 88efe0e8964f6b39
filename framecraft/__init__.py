"""FrameCraft custom framing quote engine."""
