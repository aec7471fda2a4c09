import requests
from requests import RequestException, Response

from util import log
from util.config import config
from util.error_codes import BOT_TOKEN_MISSING, TELEGRAM_SEND_FAILED
from util.errors import ConfigurationError, ExternalServiceError


class TelegramBotAPI:
    """https://core.telegram.org/bots/api"""
    __bot_api_url: str

    def __init__(self):
        bot_token = config.telegram_bot_token.get_secret_value()
        if not bot_token or bot_token == "invalid":
            raise ConfigurationError("Telegram bot token is not configured", BOT_TOKEN_MISSING)
        self.__bot_api_url = f"{config.telegram_api_base_url}/bot{bot_token}"

    def send_text_message(
        self,
        chat_id: int | str,
        text: str,
        parse_mode: str | None = None,
    ) -> dict:
        log.t(f"Sending message to chat #{chat_id}")
        url = f"{self.__bot_api_url}/sendMessage"
        payload = {
            "chat_id": chat_id,
            "text": text,
        }
        if parse_mode:
            payload["parse_mode"] = parse_mode
        try:
            response = requests.post(url, json = payload, timeout = config.web_timeout_s)
            self.__raise_for_status(response)
            return response.json()
        except RequestException as e:
            raise ExternalServiceError(f"Failed to send a message to chat #{chat_id}", TELEGRAM_SEND_FAILED) from e

    # noinspection PyMethodMayBeStatic
    def __raise_for_status(self, response: Response | None):
        if response is None:
            message = "No API response received"
            log.w(f"  {message}")
            raise RequestException(message)
        if response.status_code != 200:
            log.w(f"  Status is not '200': HTTP_{response.status_code}!", response.text)
            response.raise_for_status()
