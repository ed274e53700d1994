"""Tests for dependency injection container."""

from pathlib import Path


def _paths(tmp_path: Path):
    from ui.config import AppPaths

    return AppPaths(
        config_path=tmp_path / "config.yml",
        css_path=tmp_path / "style.css",
    )


def test_container_create_with_defaults(tmp_path: Path):
    from ui.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))

    assert container.settings is not None
    assert container.settings.display.page_size == 20


def test_container_reads_settings_from_config_path(tmp_path: Path):
    from ui.core.di_container import AppContainer

    paths = _paths(tmp_path)
    paths.config_path.write_text("display:\n  page_size: 15\n")

    container = AppContainer.create(paths=paths)

    assert container.settings.display.page_size == 15


def test_container_create_with_custom_settings(tmp_path: Path):
    from ui.config import ApiSettings, AppSettings, DisplaySettings
    from ui.core.di_container import AppContainer

    settings = AppSettings(
        api=ApiSettings(base_url="http://localhost:9000"),
        display=DisplaySettings(page_size=30),
    )

    container = AppContainer.create(settings=settings, paths=_paths(tmp_path))

    assert container.settings.display.page_size == 30
    assert container.api_client.base_url == "http://localhost:9000"


def test_container_api_client_lazy_singleton(tmp_path: Path):
    from ui.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))
    assert container._api_client is None

    client1 = container.api_client
    client2 = container.api_client

    assert client1 is client2


def test_container_background_loop_singleton(tmp_path: Path):
    from ui.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))

    assert container.background_loop is container.background_loop
    assert container.background_loop.is_running() is False


def test_container_create_controller_uses_settings(tmp_path: Path):
    from ui.config import AppSettings, DisplaySettings
    from ui.core.di_container import AppContainer

    settings = AppSettings(display=DisplaySettings(page_size=25))
    container = AppContainer.create(settings=settings, paths=_paths(tmp_path))

    controller = container.create_controller()

    assert controller.snapshot().cursor.page_size == 25
    assert controller.snapshot().cursor.next_offset == 0


class _FailingClient:
    def __init__(self):
        self.close_calls = 0

    async def close(self):
        self.close_calls += 1
        raise RuntimeError("pool already closed")


def test_container_shutdown_stops_loop_when_close_fails(tmp_path: Path):
    from ui.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))
    client = _FailingClient()
    container._api_client = client
    container.background_loop.start()

    container.shutdown()

    assert client.close_calls == 1
    assert container.background_loop.is_running() is False


def test_container_shutdown_closes_client_and_stops_loop(tmp_path: Path):
    from ui.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))
    client = container.api_client
    container.background_loop.start()

    container.shutdown()

    assert client.client.is_closed
    assert container.background_loop.is_running() is False


def test_container_shutdown_without_started_loop_is_noop(tmp_path: Path):
    from ui.core.di_container import AppContainer

    container = AppContainer.create(paths=_paths(tmp_path))

    container.shutdown()

    assert container._api_client is None
