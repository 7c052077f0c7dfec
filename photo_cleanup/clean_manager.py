"""
クリーンアップ管理モジュール

JPEGファイルのスキャン、RAWファイルとのマッチング、削除計画の作成、
削除処理までの一連の流れを管理します。
"""

import time

from .deleter import Deleter
from .exceptions import FileOperationError
from .file_scanner import FileScanner
from .logger import create_default_logger
from .matcher import Matcher
from .models import CleanConfig, RunResult
from .path_validator import PathValidator
from .planner import build_plan


class CleanManager:
    """クリーンアップ処理を担当するクラス"""
    
    def __init__(self):
        """CleanManagerを初期化"""
        self.file_scanner = FileScanner()
        self.deleter = Deleter()
        self.progress_logger = None
    
    def run(self, config: CleanConfig) -> RunResult:
        """
        JPEGファイルを検索し、モードに応じて削除
        
        Args:
            config: 実行設定
        
        Returns:
            削除結果（ドライランの場合は空の結果）
        
        Raises:
            ValidationError: RAWディレクトリまたは圧縮画像ディレクトリが無効な場合
            FileOperationError: ログファイルを作成できない場合
        """
        # 1. 事前検証（スキャン前に両方のルートを確認）
        PathValidator.validate_directory(config.raw_root)
        PathValidator.validate_directory(config.compressed_root)
        
        try:
            self.progress_logger = create_default_logger(
                verbose=config.verbose,
                summary_only=config.summary_only,
                log_file=config.log_file
            )
        except OSError as e:
            raise FileOperationError(f"ログファイルを作成できません: {config.log_file} ({e})") from e
        self.progress_logger.log_processing_start(config)
        
        try:
            # 2. JPEGファイルのスキャン
            self.progress_logger.log_info(f"JPEGファイルをスキャン中: {config.compressed_root}")
            scan_result = self.file_scanner.scan_jpeg_files(config.compressed_root)
            self.progress_logger.log_scan_complete(scan_result)
            
            # 3. マッチング処理
            start_time = time.time()
            matcher = Matcher(config.compressed_root, config.raw_root)
            results = matcher.match_all(scan_result.files, self.progress_logger)
            self.progress_logger.log_debug(f"マッチング処理時間: {time.time() - start_time:.2f}秒")
            
            # 4. 削除計画
            plan = build_plan(results, config.mode)
            self.progress_logger.log_plan(plan, config.dry_run)
            
            if config.dry_run:
                self.progress_logger.log_info("ドライランのため削除は行いませんでした。")
                return RunResult()
            
            if not plan.files:
                self.progress_logger.log_info("削除対象のファイルはありません。")
                return RunResult()
            
            # 5. 削除処理
            result = self.deleter.delete_files(plan, self.progress_logger)
            self.progress_logger.log_run_complete(result)
            return result
        
        except Exception as e:
            self.progress_logger.log_error(config.compressed_root, f"クリーンアップ処理エラー: {e}", e)
            raise
