"""Compile a lolmark page in 3 lines, zero config, zero deps."""

from lolmark import to_html

html = to_html("#HAI #MAEK PARAGRAF hai #GIMMEH BOLD world #MKAY #OIC #KTHXBYE")
print(html)
