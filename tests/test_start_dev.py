import start_dev


def test_python_version_check_passes_on_current_interpreter():
    assert start_dev.check_python_version() is None


def test_python_version_check_rejects_old_interpreter(monkeypatch):
    monkeypatch.setattr(start_dev, 'MIN_PYTHON', (99, 0))
    assert 'Python 99.0+ required' in start_dev.check_python_version()


def test_dependency_check(monkeypatch):
    assert start_dev.check_dependencies() == []

    monkeypatch.setattr(start_dev, 'REQUIRED_MODULES', ('flask', 'no_such_module_here'))
    assert start_dev.check_dependencies() == ['no_such_module_here']
