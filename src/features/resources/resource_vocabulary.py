# Defaults used when a field can't be extracted
NAME_DEFAULT = "未知名称"
TAGS_DEFAULT = "无标签"
DESCRIPTION_DEFAULT = "无描述"
LINK_DEFAULT = "无链接"

# Description terminators, tried in this order
DESCRIPTION_END_MARKER = "💾 获取资源请点击："
DESCRIPTION_END_FALLBACK = "获取资源"

# Hyperlink labels that mark the primary download link
LINK_TRIGGER_PHRASES = ("点我获取", "点击获取")

# Pointer glyphs bracketing a textual link: 👉 ... 👈
LINK_POINTER_START = "👉"
LINK_POINTER_END = "👈"

# Reply labels, in output order
NAME_LABEL = "资源名称："
TAGS_LABEL = "资源标签："
DESCRIPTION_LABEL = "资源描述："
LINK_LABEL = "资源链接："
