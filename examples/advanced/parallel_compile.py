"""Compile 1000 pages in parallel, each thread with its own config."""

from concurrent.futures import ThreadPoolExecutor

from lolmark import CompileConfig, Compiler

pages = [f"#HAI #MAEK PARAGRAF page {i} content #OIC #KTHXBYE" for i in range(1000)]
compiler = Compiler(config=CompileConfig(fragment_separator=""))

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(compiler, pages))

print(f"Compiled {len(results)} pages in parallel")
print("First page:", results[0])
