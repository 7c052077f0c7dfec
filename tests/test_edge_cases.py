"""
エッジケースのユニットテスト

photo-cleanupの各コンポーネントのエッジケースをテストします。
"""

import argparse
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from photo_cleanup.clean_manager import CleanManager
from photo_cleanup.cli import main, parse_bool, EXIT_ERROR
from photo_cleanup.exceptions import FileOperationError, ValidationError
from photo_cleanup.file_scanner import FileScanner
from photo_cleanup.matcher import Matcher
from photo_cleanup.models import CleanConfig, CleanMode, MatchResult
from photo_cleanup.planner import build_plan


class TestScannerEdgeCases(unittest.TestCase):
    """FileScannerのエッジケーステスト"""

    def setUp(self):
        """テスト前の準備"""
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()

    def tearDown(self):
        """テスト後のクリーンアップ"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_empty_directory(self):
        """空のディレクトリのスキャン"""
        result = FileScanner().scan_jpeg_files(self.temp_dir)
        self.assertEqual(result.files, [])
        self.assertEqual(result.skipped, 0)

    def test_dotfile_named_jpg_is_not_a_jpeg(self):
        """'.jpg' という名前のファイルは拡張子を持たない"""
        (self.temp_dir / ".jpg").write_bytes(b"data")
        result = FileScanner().scan_jpeg_files(self.temp_dir)
        self.assertEqual(result.files, [])

    @unittest.skipUnless(hasattr(os, 'symlink'), "シンボリックリンク非対応")
    def test_symlinked_jpeg_file_is_discovered(self):
        """JPEGへのシンボリックリンクも発見される"""
        target = self.temp_dir / "target.jpg"
        target.write_bytes(b"data")
        root = self.temp_dir / "compressed"
        root.mkdir()
        (root / "link.jpg").symlink_to(target)

        result = FileScanner().scan_jpeg_files(root)
        self.assertEqual(result.files, [root / "link.jpg"])

    @unittest.skipUnless(hasattr(os, 'symlink'), "シンボリックリンク非対応")
    def test_dangling_symlink_is_ignored(self):
        """リンク先のないシンボリックリンクは通常ファイルではないため除外される"""
        (self.temp_dir / "broken.jpg").symlink_to(self.temp_dir / "nowhere.jpg")
        result = FileScanner().scan_jpeg_files(self.temp_dir)
        self.assertEqual(result.files, [])

    def test_traversal_order_is_reproducible(self):
        """同じツリーに対して同じ順序で結果を返す"""
        for name in ["c.jpg", "a.jpg", "b.JPG"]:
            (self.temp_dir / name).write_bytes(b"data")
        (self.temp_dir / "sub").mkdir()
        (self.temp_dir / "sub" / "d.jpeg").write_bytes(b"data")

        first = FileScanner().scan_jpeg_files(self.temp_dir).files
        second = FileScanner().scan_jpeg_files(self.temp_dir).files
        self.assertEqual(first, second)
        self.assertEqual(len(first), 4)


class TestMatcherEdgeCases(unittest.TestCase):
    """Matcherのエッジケーステスト"""

    def setUp(self):
        """テスト前の準備"""
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()
        self.raw_root = self.temp_dir / "raw"
        self.compressed_root = self.temp_dir / "compressed"
        self.raw_root.mkdir()
        self.compressed_root.mkdir()
        self.matcher = Matcher(self.compressed_root, self.raw_root)

    def tearDown(self):
        """テスト後のクリーンアップ"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_stem_with_dots(self):
        """最後の拡張子だけを除いたベース名で検索する"""
        jpeg_path = self.compressed_root / "IMG.0001.jpg"
        jpeg_path.write_bytes(b"jpeg")
        raw_path = self.raw_root / "IMG.0001.orf"
        raw_path.write_bytes(b"raw")

        self.assertEqual(self.matcher.find_raw_match(jpeg_path), raw_path)

    def test_mixed_case_raw_extension_is_not_probed(self):
        """小文字と大文字以外の綴り（例: .Nef）は確認対象外"""
        jpeg_path = self.compressed_root / "IMG_1.jpg"
        jpeg_path.write_bytes(b"jpeg")
        (self.raw_root / "IMG_1.Nef").write_bytes(b"raw")

        self.assertIsNone(self.matcher.find_raw_match(jpeg_path))

    def test_stem_case_must_match(self):
        """ベース名の大文字小文字は変換せずに検索する"""
        jpeg_path = self.compressed_root / "img_1.jpg"
        jpeg_path.write_bytes(b"jpeg")
        (self.raw_root / "IMG_1.nef").write_bytes(b"raw")

        self.assertIsNone(self.matcher.find_raw_match(jpeg_path))

    def test_raw_dir_that_is_a_file(self):
        """RAW側の同名パスがファイルの場合はマッチなし"""
        (self.compressed_root / "sub").mkdir()
        jpeg_path = self.compressed_root / "sub" / "IMG_1.jpg"
        jpeg_path.write_bytes(b"jpeg")
        (self.raw_root / "sub").write_bytes(b"not a directory")

        self.assertIsNone(self.matcher.find_raw_match(jpeg_path))


class TestPlanEdgeCases(unittest.TestCase):
    """削除計画のエッジケーステスト"""

    def test_all_matched(self):
        """すべてマッチした場合、orphanedモードの削除対象は空"""
        results = [MatchResult(Path(f"/c/{i}.jpg"), Path(f"/r/{i}.nef")) for i in range(3)]
        plan = build_plan(results, CleanMode.ORPHANED)
        self.assertEqual(plan.files, [])
        self.assertEqual(plan.matched, 3)
        self.assertEqual(plan.unmatched, 0)


class TestCliEdgeCases(unittest.TestCase):
    """CLIのエッジケーステスト"""

    def setUp(self):
        """テスト前の準備"""
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()
        self.raw_root = self.temp_dir / "raw"
        self.compressed_root = self.temp_dir / "compressed"
        self.raw_root.mkdir()
        self.compressed_root.mkdir()

    def tearDown(self):
        """テスト後のクリーンアップ"""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_parse_bool_values(self):
        """真偽値文字列の解釈"""
        for value in ['true', 'TRUE', 'yes', '1', 'on']:
            self.assertTrue(parse_bool(value))
        for value in ['false', 'False', 'no', '0', 'off']:
            self.assertFalse(parse_bool(value))
        with self.assertRaises(argparse.ArgumentTypeError):
            parse_bool('maybe')

    def test_invalid_dry_value_is_rejected(self):
        """--dry に真偽値以外を渡すと引数エラー"""
        with self.assertRaises(SystemExit):
            main(['clean', '-r', str(self.raw_root), '-c', str(self.compressed_root), '--dry', 'maybe'])

    def test_unwritable_log_file_is_processing_error(self):
        """ログファイルを作成できない場合は処理エラーとして終了コード1"""
        blocker = self.temp_dir / "blocker"
        blocker.write_text("file")
        log_file = blocker / "run.log"

        with patch('sys.stderr') as stderr:
            exit_code = main(['clean', '-r', str(self.raw_root), '-c', str(self.compressed_root),
                              '--log-file', str(log_file)])

        self.assertEqual(exit_code, EXIT_ERROR)
        written = ''.join(call.args[0] for call in stderr.write.call_args_list)
        self.assertIn("処理エラー", written)

    def test_clean_manager_raises_log_file_error(self):
        """CleanManagerはログファイル作成失敗をFileOperationErrorとして送出する"""
        blocker = self.temp_dir / "blocker"
        blocker.write_text("file")
        config = CleanConfig(
            raw_root=self.raw_root,
            compressed_root=self.compressed_root,
            mode=CleanMode.ORPHANED,
            log_file=blocker / "run.log"
        )
        with self.assertRaises(FileOperationError):
            CleanManager().run(config)

    def test_clean_manager_validates_before_scanning(self):
        """事前検証に失敗した場合はスキャンを行わない"""
        config = CleanConfig(
            raw_root=self.temp_dir / "missing",
            compressed_root=self.compressed_root,
            mode=CleanMode.ORPHANED
        )
        manager = CleanManager()
        with patch.object(manager.file_scanner, 'scan_jpeg_files') as scan:
            with self.assertRaises(ValidationError):
                manager.run(config)
            scan.assert_not_called()


if __name__ == '__main__':
    unittest.main()
