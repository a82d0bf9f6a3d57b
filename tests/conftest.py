"""Pytest配置文件"""

import sys
from pathlib import Path

# 添加src目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def mock_config():
    """提供模拟配置"""
    from src.termtable.common.config import Config

    config = Config()
    config.set("table.padding", 2)
    config.set("table.horizontal_rules", "all")
    config.set("table.column_alignment", {"Age": "right"})

    return config


@pytest.fixture
def people_table():
    """提供两列两行的示例表格"""
    from src.termtable.table import ASCIITable

    return (
        ASCIITable(["Name", "Age"])
        .add_row(["Alice", "30"])
        .add_row(["Bob", "25"])
    )
