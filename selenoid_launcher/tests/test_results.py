from selenoid_launcher.core.results import LifecycleReport, StepResult, StepStatus


def test_report_tracks_degraded_steps() -> None:
    report = LifecycleReport(phase="prepare")
    report.add(StepResult.success("stop"))
    report.add(StepResult.degraded("pull:selenoid/chrome:120.0", "timeout"))

    assert report.degraded
    assert not report.ok
    assert [step.step for step in report.failed_steps] == ["pull:selenoid/chrome:120.0"]


def test_pulled_lists_transferred_images_only() -> None:
    report = LifecycleReport(phase="prepare")
    report.add(StepResult.success("pull:selenoid/chrome:120.0"))
    report.add(StepResult.success("pull:selenoid/chrome:119.0", skipped=True))
    report.add(StepResult.degraded("pull:selenoid/firefox:121.0", "denied"))

    assert report.pulled == ["selenoid/chrome:120.0"]


def test_fatal_result_is_not_ok() -> None:
    result = StepResult.fatal("run", "boom")

    assert result.status == StepStatus.FATAL
    assert not result.ok
