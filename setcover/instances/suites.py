"""
Instance: test-suite minimization.

Each test exercises some requirements. The smallest suites that still
exercise every requirement are the minimum covers, with tests as
subsets and requirements as elements.
"""

from ..core.cover import Cover


SAMPLE_SUITE = {
    "test_login":           ["auth.password", "auth.session", "ui.form"],
    "test_login_sso":       ["auth.sso", "auth.session"],
    "test_logout":          ["auth.session"],
    "test_signup":          ["auth.password", "ui.form", "mail.send"],
    "test_reset_password":  ["auth.password", "mail.send", "mail.template"],
    "test_newsletter":      ["mail.send", "mail.template"],
    "test_profile_page":    ["ui.form", "ui.avatar"],
    "test_avatar_upload":   ["ui.avatar", "storage.upload"],
    "test_export":          ["storage.download"],
    "test_backup":          ["storage.upload", "storage.download"],
}


def make_test_suite_cover(table=None) -> Cover:
    """
    Cover problem for a test suite.

    Args:
        table: {test name: requirements it exercises} (default: SAMPLE_SUITE)
    """
    if table is None:
        table = SAMPLE_SUITE
    cover = Cover()
    for test, requirements in table.items():
        cover.add(test, requirements)
    return cover
