import os
from typing import Callable

from pydantic import SecretStr

from util.singleton import Singleton


class Config(metaclass = Singleton):

    log_level: str
    log_telegram_update: bool
    web_timeout_s: int
    telegram_bot_username: str
    telegram_api_base_url: str
    version: str

    telegram_bot_token: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.telegram_bot_token,
        ]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_log_telegram_update: bool = False,
        def_web_timeout_s: int = 10,
        def_telegram_bot_username: str = "resource_parser_bot",
        def_telegram_api_base_url: str = "https://api.telegram.org",
        def_version: str = "dev",

        def_telegram_bot_token: SecretStr = SecretStr("invalid"),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.log_telegram_update = self.__env("LOG_TG_UPDATE", lambda: str(def_log_telegram_update)).lower() == "true"
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.telegram_bot_username = self.__env("TELEGRAM_BOT_USERNAME", lambda: def_telegram_bot_username)
        self.telegram_api_base_url = self.__env("TELEGRAM_API_BASE_URL", lambda: def_telegram_api_base_url)
        self.version = self.__env("VERSION", lambda: def_version)

        self.telegram_bot_token = self.__senv("TELEGRAM_BOT_TOKEN", lambda: def_telegram_bot_token)
        # @formatter:on

    @property
    def verbose(self) -> bool:
        return self.log_level in ["local", "trace", "debug"]

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
