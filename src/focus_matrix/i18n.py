# src/focus_matrix/i18n.py

"""Static en/zh string tables and a dotted-key lookup helper."""

from __future__ import annotations

from typing import Any

from .preferences.language import Language

TRANSLATIONS: dict[Language, dict[str, Any]] = {
    Language.EN: {
        "title": "Focus Matrix",
        "subtitle": "Prioritize your tasks using the Eisenhower Matrix method",
        "switchTo": "中文",
        "quadrants": {
            "q1": {
                "title": "Do First",
                "description": "Urgent and important tasks that require immediate attention",
            },
            "q2": {
                "title": "Schedule",
                "description": "Important but not urgent tasks to plan for later",
            },
            "q3": {
                "title": "Delegate",
                "description": "Urgent but not important tasks that can be delegated",
            },
            "q4": {
                "title": "Don't Do",
                "description": "Neither urgent nor important tasks to eliminate",
            },
        },
        "options": {
            "q1": "Urgent & Important",
            "q2": "Important, Not Urgent",
            "q3": "Urgent, Not Important",
            "q4": "Not Urgent or Important",
        },
        "console": {
            "welcome": "Type a task to add it to the active quadrant. Use /help for commands, /exit to quit.",
            "prompt": "[{quadrant}] > ",
            "added": "Added #{index} to {quadrant}: {text}",
            "emptyText": "Task text is empty, nothing added.",
            "deleted": "Deleted: {text}",
            "moved": "Moved \"{text}\" to {quadrant}.",
            "unchanged": "\"{text}\" is already in {quadrant}.",
            "notFound": "No task matches {ref!r}.",
            "ambiguous": "{ref!r} matches more than one task; use a longer id prefix or the list number.",
            "badQuadrant": "Unknown quadrant {raw!r}. Use q1, q2, q3 or q4.",
            "activeQuadrant": "Active quadrant: {quadrant}",
            "language": "Language: English. /lang switches to {switch}.",
            "noTasks": "(no tasks)",
            "usageAdd": "Usage: /add <text>",
            "usageMove": "Usage: /move <number|id> <q1..q4>",
            "usageDelete": "Usage: /del <number|id>",
            "status": "Language: {language}\nActive quadrant: {quadrant}\nTasks: {total} ({counts})\nStorage: {storage}",
            "unknownCommand": "Unknown command: /{name}. Use /help to list available commands.",
            "emptyCommand": "Empty command. Use /help to list available commands.",
            "internalError": "Internal error while handling a command.",
            "helpHeader": "Available commands:",
            "bye": "Bye.",
        },
        "help": {
            "help": "Show available commands.",
            "add": "Add a task to the active quadrant: /add <text>.",
            "quadrant": "Show or set the active quadrant: /q [q1..q4].",
            "list": "Show the board or one quadrant: /list [q1..q4].",
            "move": "Move a task to another quadrant: /move <number|id> <q1..q4>.",
            "delete": "Delete a task: /del <number|id>.",
            "lang": "Switch between English and Chinese.",
            "status": "Show language, active quadrant and task counts.",
        },
    },
    Language.ZH: {
        "title": "专注矩阵",
        "subtitle": "使用艾森豪威尔矩阵方法安排任务优先级",
        "switchTo": "English",
        "quadrants": {
            "q1": {
                "title": "立即执行",
                "description": "紧急且重要的任务，需要立即处理",
            },
            "q2": {
                "title": "计划安排",
                "description": "重要但不紧急的任务，需要规划时间",
            },
            "q3": {
                "title": "委托他人",
                "description": "紧急但不重要的任务，可以委托他人",
            },
            "q4": {
                "title": "删减任务",
                "description": "既不紧急也不重要的任务，考虑删减",
            },
        },
        "options": {
            "q1": "紧急且重要",
            "q2": "重要不紧急",
            "q3": "紧急不重要",
            "q4": "不紧急不重要",
        },
        "console": {
            "welcome": "输入任务内容即可添加到当前象限。输入 /help 查看命令，/exit 退出。",
            "prompt": "[{quadrant}] > ",
            "added": "已添加 #{index} 到 {quadrant}：{text}",
            "emptyText": "任务内容为空，未添加。",
            "deleted": "已删除：{text}",
            "moved": "已将“{text}”移动到 {quadrant}。",
            "unchanged": "“{text}”已在 {quadrant} 中。",
            "notFound": "没有匹配 {ref!r} 的任务。",
            "ambiguous": "{ref!r} 匹配多个任务，请使用更长的 ID 前缀或列表编号。",
            "badQuadrant": "未知象限 {raw!r}。请使用 q1、q2、q3 或 q4。",
            "activeQuadrant": "当前象限：{quadrant}",
            "language": "语言：中文。输入 /lang 切换到 {switch}。",
            "noTasks": "（暂无任务）",
            "usageAdd": "用法：/add <内容>",
            "usageMove": "用法：/move <编号|ID> <q1..q4>",
            "usageDelete": "用法：/del <编号|ID>",
            "status": "语言：{language}\n当前象限：{quadrant}\n任务：{total}（{counts}）\n存储：{storage}",
            "unknownCommand": "未知命令：/{name}。输入 /help 查看可用命令。",
            "emptyCommand": "空命令。输入 /help 查看可用命令。",
            "internalError": "处理命令时发生内部错误。",
            "helpHeader": "可用命令：",
            "bye": "再见。",
        },
        "help": {
            "help": "显示可用命令。",
            "add": "添加任务到当前象限：/add <内容>。",
            "quadrant": "查看或设置当前象限：/q [q1..q4]。",
            "list": "显示整个矩阵或单个象限：/list [q1..q4]。",
            "move": "将任务移动到其他象限：/move <编号|ID> <q1..q4>。",
            "delete": "删除任务：/del <编号|ID>。",
            "lang": "在中文和英文之间切换。",
            "status": "显示语言、当前象限和任务数量。",
        },
    },
}


def _lookup(table: dict[str, Any], key: str) -> str | None:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def tr(lang: Language | str, key: str, **fmt: Any) -> str:
    """
    Translate a dotted key ("quadrants.q1.title") for the given language.

    Falls back to English, then to the key itself. Format arguments are applied
    with str.format when given.
    """
    parsed = Language.parse(lang) or Language.EN
    text = _lookup(TRANSLATIONS[parsed], key)
    if text is None:
        text = _lookup(TRANSLATIONS[Language.EN], key)
    if text is None:
        return key
    return text.format(**fmt) if fmt else text


def quadrant_label(lang: Language | str, quadrant: str) -> str:
    """Short label used in prompts and messages, e.g. 'q2 Schedule'."""
    return f"{quadrant} {tr(lang, f'quadrants.{quadrant}.title')}"
