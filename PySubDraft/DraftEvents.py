from blinker import Signal


class DraftEvents:
    """Container for blinker signals emitted while building and saving drafts."""

    cue_projected: Signal
    draft_saved: Signal

    def __init__(self):
        self.cue_projected = Signal("draft-cue-projected")
        self.draft_saved = Signal("draft-saved")
