# promptvault/samples.py
"""
Built-in example prompts for a fresh store.

Seeding is idempotent: a sample is skipped when a prompt with the same name
already exists.
"""

import logging

from sqlalchemy.orm import Session

from promptvault.models import Prompt
from promptvault.services.prompt_service import create_prompt

logger = logging.getLogger(__name__)

SAMPLE_SOURCE = "内置示例"

SAMPLE_PROMPTS = [
    {
        "name": "代码审查助手",
        "content": (
            "请作为一个资深的代码审查专家，仔细审查以下代码，并提供详细的反馈：\n\n"
            "1. 代码质量和可读性\n"
            "2. 潜在的bug和安全问题\n"
            "3. 性能优化建议\n"
            "4. 最佳实践建议\n\n"
            "请提供具体的改进建议和修改方案。"
        ),
        "tags": ["编程", "代码审查", "质量"],
        "notes": "用于代码审查和质量改进的提示词",
    },
    {
        "name": "文案创作专家",
        "content": (
            "你是一位经验丰富的文案创作专家，擅长创作各种类型的营销文案。请根据以下要求创作文案：\n\n"
            "- 目标受众：[请描述]\n"
            "- 产品/服务：[请描述]\n"
            "- 文案类型：[广告文案/产品介绍/社交媒体等]\n"
            "- 风格要求：[正式/轻松/专业等]\n\n"
            "请创作吸引人且有说服力的文案。"
        ),
        "tags": ["写作", "营销", "文案"],
        "notes": "专业的营销文案创作助手",
    },
    {
        "name": "学习计划制定师",
        "content": (
            "作为一名专业的学习规划师，请帮我制定一个详细的学习计划：\n\n"
            "学习目标：[请描述你想学习的内容]\n"
            "当前水平：[初学者/中级/高级]\n"
            "可用时间：[每天/每周可投入的时间]\n"
            "学习期限：[希望达成目标的时间]\n\n"
            "请提供：\n"
            "1. 分阶段的学习路径\n"
            "2. 具体的学习资源推荐\n"
            "3. 时间安排建议\n"
            "4. 学习效果评估方法"
        ),
        "tags": ["教育", "学习", "规划"],
        "notes": "帮助制定个性化学习计划",
    },
    {
        "name": "翻译专家",
        "content": (
            "你是一位专业的翻译专家，精通多种语言。请按照以下要求进行翻译：\n\n"
            "原文语言：[请指定]\n"
            "目标语言：[请指定]\n"
            "翻译类型：[直译/意译/本地化]\n"
            "专业领域：[技术/商务/文学/日常等]\n\n"
            "请提供准确、流畅、符合目标语言习惯的翻译，并在必要时提供注释说明。"
        ),
        "tags": ["语言", "翻译", "沟通"],
        "notes": "专业的多语言翻译助手",
    },
    {
        "name": "数据分析师",
        "content": (
            "作为一名资深的数据分析师，请帮我分析以下数据：\n\n"
            "[请提供数据或描述数据情况]\n\n"
            "分析要求：\n"
            "1. 数据清洗和预处理建议\n"
            "2. 关键指标和趋势分析\n"
            "3. 数据可视化建议\n"
            "4. 业务洞察和建议\n"
            "5. 后续行动计划\n\n"
            "请提供专业的分析报告和可执行的建议。"
        ),
        "tags": ["数据分析", "商业", "洞察"],
        "notes": "专业的数据分析和洞察工具",
    },
]


def seed_sample_prompts(db: Session) -> list[int]:
    """Create any missing sample prompts. Returns the ids created."""
    created: list[int] = []

    for sample in SAMPLE_PROMPTS:
        existing = db.query(Prompt.id).filter(Prompt.name == sample["name"]).first()
        if existing:
            logger.info(f"Sample '{sample['name']}' already exists, skipping")
            continue

        prompt_id = create_prompt(
            db,
            name=sample["name"],
            content=sample["content"],
            source=SAMPLE_SOURCE,
            notes=sample["notes"],
            tags=sample["tags"],
        )
        created.append(prompt_id)

    logger.info(f"Seeded {len(created)} of {len(SAMPLE_PROMPTS)} sample prompts")
    return created
