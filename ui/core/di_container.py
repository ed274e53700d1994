"""Dependency injection container."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ui.config import AppPaths, AppSettings
from ui.managers.product_list_controller import ProductListController
from ui.services import BackgroundLoop, ProductApiClient

logger = logging.getLogger("ProductFeed.AppContainer")


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _api_client: Optional[ProductApiClient] = field(
        default=None, init=False, repr=False
    )
    _background_loop: Optional[BackgroundLoop] = field(
        default=None, init=False, repr=False
    )

    @property
    def api_client(self) -> ProductApiClient:
        if self._api_client is None:
            self._api_client = ProductApiClient(
                base_url=self.settings.api.base_url,
                timeout=self.settings.api.timeout_seconds,
            )
        return self._api_client

    @property
    def background_loop(self) -> BackgroundLoop:
        if self._background_loop is None:
            self._background_loop = BackgroundLoop()
        return self._background_loop

    def create_controller(self) -> ProductListController:
        return ProductListController(
            fetcher=self.api_client,
            page_size=self.settings.display.page_size,
        )

    def shutdown(self, timeout: float = 2.0) -> None:
        """Close the API client on the background loop, then stop the loop.

        The loop is stopped even when closing the client fails or times out.
        """
        loop = self._background_loop
        if loop is None or not loop.is_running():
            return
        try:
            if self._api_client is not None:
                loop.run(self._api_client.close()).result(timeout=timeout)
        except Exception:
            logger.exception("Failed to close the product API client")
        finally:
            loop.stop()

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(paths.config_path),
            paths=paths,
        )
