from jmeter_web.common.response.code.base_code import BaseCode


class SuccessCode(BaseCode):
    TEST_STARTED = ("Test started. Please wait...", 200)
    TEST_SUBMITTED = ("Test submitted. Poll the job for its result", 202)
    TEST_COMPLETED = ("Test completed", 200)
    REPORT_GENERATED = ("Report generated successfully", 200)
