"""
ロギングシステム

photo-cleanupのロギング機能を提供します。
標準出力とファイル出力の両方をサポートし、ファイルごとの表示と集計結果の表示を管理します。
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .models import CleanConfig, DeletionPlan, RunResult, ScanResult


@dataclass
class LogConfig:
    """ログ設定"""
    console_level: int = logging.INFO
    file_level: int = logging.DEBUG
    log_file: Optional[Path] = None
    verbose: bool = False
    summary_only: bool = False


class ProgressLogger:
    """進捗表示とロギングを管理するクラス"""
    
    def __init__(self, config: LogConfig):
        self.config = config
        self.logger = self._setup_logger()
        self._start_time: Optional[datetime] = None
    
    @property
    def per_file(self) -> bool:
        """ファイルごとの行を表示するかどうか（summary-onlyが優先）"""
        return self.config.verbose and not self.config.summary_only
    
    def _setup_logger(self) -> logging.Logger:
        """ロガーのセットアップ"""
        logger = logging.getLogger('photo_cleanup')
        logger.setLevel(logging.DEBUG)
        
        # 既存のハンドラーをクリア
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        
        console_formatter = logging.Formatter('%(message)s')
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.config.console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
        
        if self.config.log_file:
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)
            
            file_handler = logging.FileHandler(self.config.log_file, encoding='utf-8')
            file_handler.setLevel(self.config.file_level)
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
        
        return logger
    
    def log_processing_start(self, config: CleanConfig):
        """処理開始時のサマリー表示"""
        self._start_time = datetime.now()
        
        self.logger.info("=" * 60)
        self.logger.info("photo-cleanup - 処理開始")
        self.logger.info("=" * 60)
        self.logger.info(f"開始時刻: {self._start_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"RAWディレクトリ: {config.raw_root}")
        self.logger.info(f"圧縮画像ディレクトリ: {config.compressed_root}")
        self.logger.info(f"モード: {config.mode.value}")
        if config.dry_run:
            self.logger.info("ドライラン: ファイルは削除されません")
        self.logger.info("")
    
    def log_scan_complete(self, scan_result: ScanResult):
        """JPEGスキャン完了のログ"""
        self.logger.info(f"JPEGファイル発見: {len(scan_result.files)}個")
        if scan_result.skipped:
            self.log_warning(f"読み取れずにスキップしたエントリ: {scan_result.skipped}個")
    
    def log_match_result(self, jpeg_path: Path, raw_path: Optional[Path]):
        """ファイルごとのマッチング結果"""
        if raw_path is not None:
            message = f"MATCH: {jpeg_path} -> {raw_path}"
        else:
            message = f"NO_MATCH: {jpeg_path}"
        
        if self.per_file:
            self.logger.info(message)
        else:
            self.logger.debug(message)
    
    def log_plan(self, plan: DeletionPlan, dry_run: bool):
        """削除計画の表示"""
        self.logger.info("")
        self.logger.info("マッチング結果:")
        self.logger.info(f"  - JPEGファイル総数: {plan.total}")
        self.logger.info(f"  - RAWあり: {plan.matched}")
        self.logger.info(f"  - RAWなし: {plan.unmatched}")
        self.logger.info(f"削除対象 ({plan.mode.value}): {len(plan.files)}個")
        
        if dry_run and not self.config.summary_only:
            for file_path in plan.files:
                self.logger.info(f"  [DRY RUN] 削除予定: {file_path}")
    
    def log_deleted(self, file_path: Path):
        """ファイルごとの削除完了"""
        if self.per_file:
            self.logger.info(f"削除: {file_path}")
        else:
            self.logger.debug(f"削除: {file_path}")
    
    def log_run_complete(self, result: RunResult):
        """削除処理完了時のサマリー表示"""
        end_time = datetime.now()
        total_time = (end_time - self._start_time).total_seconds() if self._start_time else 0
        
        self.logger.info("")
        self.logger.info("=" * 60)
        if result.errors:
            self.logger.error(f"削除失敗: {result.failed}件 (成功: {result.deleted}件)")
            for file_path, error_msg in result.errors:
                self.logger.error(f"  - {file_path}: {error_msg}")
        else:
            self.logger.info(f"削除完了: {result.deleted}個のファイルを削除しました")
        self.logger.info(f"総処理時間: {total_time:.2f}秒")
        self.logger.info("=" * 60)
    
    def log_error(self, file_path: Path, error_message: str, exception: Optional[Exception] = None):
        """エラーログの詳細記録"""
        error_msg = f"エラー - {file_path}: {error_message}"
        
        if exception:
            error_msg += f" ({type(exception).__name__}: {str(exception)})"
        
        self.logger.error(error_msg)
        
        # 詳細なスタックトレースはファイルログのみに記録
        if exception and self.config.log_file:
            self.logger.debug("スタックトレース:", exc_info=exception)
    
    def log_warning(self, message: str):
        """警告メッセージのログ"""
        self.logger.warning(f"警告: {message}")
    
    def log_info(self, message: str):
        """情報メッセージのログ"""
        self.logger.info(message)
    
    def log_debug(self, message: str):
        """デバッグメッセージのログ"""
        self.logger.debug(message)


def create_default_logger(verbose: bool = False, summary_only: bool = False,
                          log_file: Optional[Path] = None) -> ProgressLogger:
    """デフォルトのロガーを作成"""
    config = LogConfig(
        console_level=logging.INFO,
        file_level=logging.DEBUG,
        log_file=log_file,
        verbose=verbose,
        summary_only=summary_only
    )
    return ProgressLogger(config)
