"""The stock span problem, solved naively and with a stack."""

from __future__ import annotations

from typing import Sequence

from taskbook.tools import bounded_int, read, read_many, say

_U8 = bounded_int(8, signed=False)


def simple_stock_span(quotes: Sequence[int], debug: bool = False) -> list[int]:
    """Spans found by walking back from each day; O(n^2)."""
    if debug:
        say("\tsimple_stock_span running...")
    spans = []
    for i, quote in enumerate(quotes):
        if debug:
            say(f"\ti = {i}:")
        k = 1
        while i - k >= 0:
            earlier = quotes[i - k]
            if debug:
                say(f"\t\ti - k = {i - k}")
                say(f"\t\t{earlier} <= {quote} comparison: k += 1 or break")
            span_end = earlier > quote
            if not span_end:
                k += 1
            if debug:
                say(f"\t\tk is now {k}")
            if span_end:
                break
        if debug:
            say(f"\t\tfor i = {i} pushing k = {k}")
        spans.append(k)
    return spans


def stack_stock_span(quotes: Sequence[int], debug: bool = False) -> list[int]:
    """Spans found with a stack of days whose quotes are still higher; O(n)."""
    if debug:
        say("\tstack_stock_span running...")
    spans = []
    stack = [0]
    if debug:
        say("\tin stack: [0]")
    for i, quote in enumerate(quotes):
        if debug:
            say(f"\ti = {i}:")
            say("\t\twhile stack is not empty:")
        while stack:
            if debug:
                say(f"\t\t\t{quotes[stack[-1]]} > {quote} comparison: break or pop")
            if quotes[stack[-1]] > quote:
                break
            stack.pop()
        if stack:
            span = i - stack[-1]
            if debug:
                say(f"\t\tstack is not empty, pushing to spans {span}")
        else:
            span = i + 1
            if debug:
                say(f"\t\tstack is empty, pushing to spans {span}")
        spans.append(span)
        if debug:
            say(f"\t\tpushing to stack {i}")
        stack.append(i)
        if debug:
            say(f"\tin stack: {stack}")
    return spans


def stock_span_task() -> None:
    """Read daily quotes and print the spans from both algorithms."""
    say("Введите числа, соответствующие ценам акций с первого по n-ный дни: ")
    quotes = read_many(_U8)
    say("Вывести данные отладки? [y/n]")
    debug = read(str) == "y"
    simple = simple_stock_span(quotes, debug)
    stacked = stack_stock_span(quotes, debug)
    say(f"Обычный (наивный) алгоритм: {simple}")
    say(f"Алгоритм с использованием стеков: {stacked}")