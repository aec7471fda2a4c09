# External Service (5000-5999)
TELEGRAM_SEND_FAILED = 5001

# Configuration (7000-7999)
BOT_TOKEN_MISSING = 7001
