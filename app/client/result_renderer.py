from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

TITLE = "面相分析结果"
DISCLAIMER = "温馨提示：本分析结果纯属娱乐，如有雷同纯属巧合。愚人节快乐！🎉"

# (field, label, fallback shown when the server leaves the field out)
RESULT_SECTIONS: Tuple[Tuple[str, str, str], ...] = (
    ("overall", "整体面相", "面相奇特，额头有光，疑似外星人转世"),
    ("career", "事业运势", "建议去月球开分公司，那里竞争小"),
    ("love", "感情运势", "你的真命天子/天女可能是一只猫"),
    ("wealth", "财运分析", "明天可能会在路上捡到一张彩票，记得刮开看看"),
    ("health", "健康提醒", "建议每天倒立3小时，据说可以长高"),
)


def render_result(result: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Return (label, text) pairs for all five sections, in display order."""
    result = result or {}
    lines = []
    for field, label, fallback in RESULT_SECTIONS:
        value = result.get(field)
        lines.append((label, value if isinstance(value, str) and value else fallback))
    return lines


def format_result(result: Optional[Mapping[str, Any]]) -> str:
    divider = "-" * 40
    body = "\n".join(f"{label}: {text}" for label, text in render_result(result))
    return f"{TITLE}\n{divider}\n{body}\n{divider}\n{DISCLAIMER}"
