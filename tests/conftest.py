pytest_plugins = ["contrib_tracker.testing.conftest"]
