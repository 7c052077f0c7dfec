"""
ファイル削除処理モジュール

削除計画に含まれるJPEGファイルを削除する機能を提供します。
各ファイルの削除は独立しており、失敗しても残りのファイルの削除は継続します。
ロールバックやリトライは行いません。
"""

import logging
from pathlib import Path
from typing import Optional

from .models import DeletionPlan, RunResult


class Deleter:
    """JPEGファイルを削除するクラス"""
    
    def __init__(self):
        """Deleterを初期化"""
        self.logger = logging.getLogger(__name__)
    
    def delete_files(self, plan: DeletionPlan, progress_logger=None) -> RunResult:
        """
        削除計画のファイルをすべて削除
        
        Args:
            plan: 削除計画
            progress_logger: 進捗ロガー
        
        Returns:
            削除結果
        """
        result = RunResult()
        
        self.logger.debug(f"ファイル削除開始: {len(plan.files)}個のファイル")
        
        for file_path in plan.files:
            error_msg = self._delete_single_file(file_path)
            
            if error_msg is None:
                result.deleted += 1
                if progress_logger:
                    progress_logger.log_deleted(file_path)
                continue
            
            result.errors.append((file_path, error_msg))
            if progress_logger:
                progress_logger.log_error(file_path, error_msg)
            else:
                self.logger.error(f"ファイル削除エラー: {file_path} - {error_msg}")
        
        self.logger.debug(
            f"ファイル削除完了: 成功={result.deleted}, 失敗={result.failed}"
        )
        return result
    
    def _delete_single_file(self, file_path: Path) -> Optional[str]:
        """
        単一ファイルを削除
        
        Args:
            file_path: 削除するファイル
        
        Returns:
            エラーメッセージ（成功した場合はNone）
        """
        try:
            file_path.unlink()
            self.logger.debug(f"削除成功: {file_path}")
            return None
        except FileNotFoundError as e:
            return f"ファイルが存在しません: {e}"
        except PermissionError as e:
            return f"アクセス権限エラー: {e}"
        except OSError as e:
            return f"ファイル操作エラー: {e}"
