from jmeter_web.common.response.code.base_code import BaseCode


class FailureCode(BaseCode):
    # 요청 오류
    INVALID_JSON = ("Invalid JSON", 400)
    INVALID_REQUEST_BODY = ("Invalid request body", 400)
    BODY_READ_FAILED = ("Error reading request body", 400)
    TEST_ID_REQUIRED = ("TestId is required", 400)
    TEST_RUN_NOT_FOUND = ("Test run not found", 404)
    TEST_RUN_CONFLICT = ("A test run with the same id is still running", 409)

    # 리소스 접근 오류
    TEST_PLAN_READ_FAILED = ("Failed to read test plans", 500)
    REPORT_LIST_FAILED = ("Failed to list reports", 500)
    TEMPLATE_LOAD_FAILED = ("Failed to load homepage template", 500)
    INTERNAL_SERVER_ERROR = ("Internal Server Error", 500)
