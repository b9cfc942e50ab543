POEM_MAXLINELENGTH = 10
LINE_BREAK = "\n"

LIGHT_THEME = "light"
DARK_THEME = "dark"

FONTNAME_LIST = (
    "LXGW WenKai",
    "Noto Serif SC",
    "Ma Shan Zheng",
    "ZCOOL XiaoWei",
    "Zhi Mang Xing",
)

SEARCH_URL = "https://www.baidu.com/s?wd={query}"
