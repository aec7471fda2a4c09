COMMAND_START = "start"
COMMAND_HELP = "help"

START_MESSAGE = (
    "👋 欢迎使用资源消息解析机器人！\n\n"
    "📌 使用方法：\n"
    "直接转发或发送包含资源信息的消息给我，我会自动解析并整理格式。\n\n"
    "💡 支持的信息：\n"
    "• 资源名称\n"
    "• 资源标签（#标签）\n"
    "• 资源描述\n"
    "• 资源链接\n\n"
    "快来试试吧！"
)

HELP_MESSAGE = (
    "📖 使用帮助\n\n"
    "1️⃣ 转发频道消息给我\n"
    "2️⃣ 或直接发送包含资源信息的文本\n"
    "3️⃣ 我会自动解析并返回整理后的信息\n\n"
    "示例消息格式：\n"
    "小梨听书 1.0.6去广告版.apk #去广告版 #纯净听书 纯净听书体验... 获取资源请点击：[链接]"
)
