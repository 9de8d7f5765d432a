from maintainer_report.testing.conftest import (  # noqa: F401
    fake_api,
    report_config,
    sample_maintainer,
    sample_repository,
)
