import os
from typing import List


# 실행 명령 구조: jmeter -n -t <plan> -l <result> -e -o <report> -J<name>=<value>...
def build_jmeter_command(
        jmeter_binary: str,
        test_plan_path: str,
        result_path: str,
        report_path: str,
        properties: dict,
) -> List[str]:
    """
    non-GUI 모드 + HTML 리포트 생성 옵션으로 jmeter 실행 인자 벡터를 구성

    properties 의 값은 변환 없이 -J<name>=<value> 로 그대로 전달됩니다.
    """
    command = [
        jmeter_binary,
        "-n",                   # non-GUI
        "-t", test_plan_path,   # 테스트 플랜
        "-l", result_path,      # 결과 파일 (.jtl)
        "-e",                   # 종료 후 리포트 생성
        "-o", report_path,      # 리포트 출력 디렉터리
    ]
    for name, value in properties.items():
        command.append(f"-J{name}={value}")
    return command


def resolve_run_paths(
        test_plan_dir: str,
        results_dir: str,
        reports_dir: str,
        test_plan: str,
        test_id: str,
        result_extension: str,
) -> dict:
    """실행 ID 기준으로 테스트 플랜 / 결과 파일 / 리포트 디렉터리 경로 계산"""
    return {
        "test_plan_path": os.path.join(test_plan_dir, test_plan),
        "result_path": os.path.join(results_dir, f"{test_id}{result_extension}"),
        "report_path": os.path.join(reports_dir, test_id),
    }
