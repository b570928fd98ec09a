from .api import SweeperAPI
from .board import BoardGenerator
from .errors import ConfigurationError
from .game import GameSession
from .grid import Cell, Grid
from .levels import Level, LevelConfig, load_levels
from .regions import RegionAnalysis, RegionAnalyzer
from .reveal import RevealEngine, RevealOutcome
from .snapshot import CellView, SessionSnapshot, Status
from .timer import GameTimer

__all__ = [
    'SweeperAPI', 'BoardGenerator', 'ConfigurationError', 'GameSession',
    'Cell', 'Grid', 'Level', 'LevelConfig', 'load_levels',
    'RegionAnalysis', 'RegionAnalyzer', 'RevealEngine', 'RevealOutcome',
    'CellView', 'SessionSnapshot', 'Status', 'GameTimer',
]
