# photo-cleanup
# RAWファイルの有無に応じて圧縮画像ツリーのJPEGファイルを削除するツール

__version__ = '0.1.0'

from .models import (
    CleanMode, CleanConfig, ScanResult, MatchResult, DeletionPlan, RunResult
)
from .exceptions import ProcessingError, ValidationError, FileOperationError
from .path_validator import PathValidator
from .file_scanner import FileScanner
from .matcher import Matcher, RAW_EXTENSIONS
from .planner import build_plan
from .deleter import Deleter
from .logger import ProgressLogger, LogConfig, create_default_logger
from .clean_manager import CleanManager

__all__ = [
    'CleanMode',
    'CleanConfig',
    'ScanResult',
    'MatchResult',
    'DeletionPlan',
    'RunResult',
    'ProcessingError',
    'ValidationError',
    'FileOperationError',
    'PathValidator',
    'FileScanner',
    'Matcher',
    'RAW_EXTENSIONS',
    'build_plan',
    'Deleter',
    'ProgressLogger',
    'LogConfig',
    'create_default_logger',
    'CleanManager'
]
