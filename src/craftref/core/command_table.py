"""Static command reference table.

The command text is a fixed dataset; the filter engine only reads it.
"""

from __future__ import annotations

from typing import Tuple

from craftref.core.models import (
    ADMIN,
    BASIC,
    CHEAT,
    PLATFORM_BEDROCK,
    PLATFORM_EDUCATION,
    PLATFORM_JAVA,
    PLATFORM_NETEASE,
    TECHNICAL,
    CommandRecord,
    LegacySyntax,
    VersionDetail,
)

CHEATS_ENABLED = "开启作弊"

COMMAND_TABLE: Tuple[CommandRecord, ...] = (
    CommandRecord(
        name="help / ?",
        description="列出所有可用指令或显示指定指令的语法帮助。",
        category=BASIC,
        details={
            PLATFORM_JAVA: VersionDetail(syntax="/help [指令名]", version_range="1.0 - 至今", permission=0),
            PLATFORM_BEDROCK: VersionDetail(
                syntax="/help [页码|指令名] 或 /? [页码|指令名]",
                version_range="1.0.0 - 至今",
                permission=0,
            ),
            PLATFORM_EDUCATION: VersionDetail(syntax="/help [页码|指令名]", version_range="1.0 - 至今", permission=0),
        },
    ),
    CommandRecord(
        name="tp / teleport",
        description="传送实体（玩家、生物等）到指定位置或另一实体。",
        category=BASIC,
        details={
            PLATFORM_JAVA: VersionDetail(
                syntax="/tp <目标> <目的地> 或 /teleport <目标> <目的地>",
                version_range="1.0 - 至今",
                permission=2,
                requirements=(CHEATS_ENABLED,),
            ),
            PLATFORM_BEDROCK: VersionDetail(
                syntax="/tp <目标> <目的地>",
                version_range="1.0.0 - 至今",
                permission=1,
                requirements=(CHEATS_ENABLED,),
            ),
        },
    ),
    CommandRecord(
        name="gamemode",
        description="更改玩家的游戏模式。",
        category=CHEAT,
        details={
            PLATFORM_JAVA: VersionDetail(syntax="/gamemode <模式>", version_range="1.3.1 - 至今", permission=2),
            PLATFORM_BEDROCK: VersionDetail(syntax="/gamemode <模式> [玩家]", version_range="1.0.0 - 至今", permission=1),
        },
    ),
    CommandRecord(
        name="give",
        description="给予玩家指定数量的物品。",
        category=CHEAT,
        details={
            PLATFORM_JAVA: VersionDetail(
                syntax="/give <玩家> <物品>[<组件>] [数量]",
                version_range="1.13 - 至今",
                permission=2,
                requirements=(CHEATS_ENABLED,),
                legacy=LegacySyntax(syntax="/give <玩家> <物品> [数量] [数据值] [NBT]", version_range="1.0 - 1.12.2"),
            ),
            PLATFORM_BEDROCK: VersionDetail(
                syntax="/give <玩家> <物品> [数量] [数据值] [组件]",
                version_range="1.0.0 - 至今",
                permission=1,
                requirements=(CHEATS_ENABLED,),
            ),
            PLATFORM_NETEASE: VersionDetail(
                syntax="/give <玩家> <物品> [数量] [数据值] [NBT]",
                version_range="1.12.2",
                permission=2,
            ),
        },
    ),
    CommandRecord(
        name="op",
        description="授予玩家管理员权限。",
        category=ADMIN,
        details={
            PLATFORM_JAVA: VersionDetail(syntax="/op <玩家>", version_range="1.0 - 至今", permission=3),
            PLATFORM_BEDROCK: VersionDetail(
                syntax="/op <玩家>",
                version_range="1.0.0 - 至今",
                permission=1,
                note="专用服务器中权限等级为 4",
            ),
        },
    ),
    CommandRecord(
        name="execute",
        description="在复杂条件下执行另一条指令。",
        category=TECHNICAL,
        details={
            PLATFORM_JAVA: VersionDetail(
                syntax="/execute ... run <指令>",
                version_range="1.13 - 至今",
                permission=2,
                legacy=LegacySyntax(syntax="/execute <实体> <x> <y> <z> <指令>", version_range="1.8 - 1.12.2"),
            ),
            PLATFORM_BEDROCK: VersionDetail(syntax="/execute ... run <指令>", version_range="1.19.70 - 至今", permission=1),
        },
    ),
    CommandRecord(
        name="toggledownfall",
        description="切换天气的降水状态。",
        category=CHEAT,
        details={
            PLATFORM_JAVA: VersionDetail(
                syntax="/toggledownfall",
                version_range="1.0 - 1.12.2",
                permission=2,
                is_deprecated=True,
                deprecation_reason="1.13 起移除，请使用 /weather",
            ),
            PLATFORM_NETEASE: VersionDetail(syntax="/toggledownfall", version_range="1.12.2", permission=2),
        },
    ),
    CommandRecord(
        name="testfor",
        description="检测是否存在符合条件的实体。",
        category=TECHNICAL,
        details={
            PLATFORM_JAVA: VersionDetail(
                syntax="/testfor <实体> [数据标签]",
                version_range="1.0 - 1.12.2",
                permission=2,
                is_deprecated=True,
                deprecation_reason="1.13 起移除，请使用 /execute if entity",
            ),
            PLATFORM_BEDROCK: VersionDetail(syntax="/testfor <目标>", version_range="1.0.0 - 至今", permission=1),
        },
    ),
)
