"""
jmeter 결과/리포트 디렉터리 준비를 위한 유틸리티
"""
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


class FileSystem:
    """디렉터리 생성 / 확인 유틸리티"""

    @staticmethod
    def ensure_directory_exists(directory_path: str) -> bool:
        """
        디렉터리가 존재하는지 확인하고, 없으면 생성

        Args:
            directory_path: 확인/생성할 디렉터리 경로

        Returns:
            bool: 디렉터리가 존재하거나 성공적으로 생성되었는지 여부
        """
        try:
            Path(directory_path).mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            logger.error(f"디렉터리 생성 실패 - 경로: {directory_path}, 오류: {str(e)}")
            return False

    @staticmethod
    def directory_exists(directory_path: str) -> bool:
        return Path(directory_path).is_dir()
