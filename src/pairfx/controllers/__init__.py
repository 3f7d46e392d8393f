"""Session-level controllers."""

from .tournament_controller import (
    ImportSummary,
    PairingGenerationResult,
    ResultRecordingResult,
    TournamentController,
)

__all__ = [
    "ImportSummary",
    "PairingGenerationResult",
    "ResultRecordingResult",
    "TournamentController",
]
