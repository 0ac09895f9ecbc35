"""
报表JSON导出 - 核心模块

模块结构：
- config/     运行期配置加载
- models/     报表数据模型（文档/页面/区带/组件/表格/样式）
- export/     流式JSON导出（写出器/组件/表格/遍历）
- interfaces  能力协议与异常定义
"""

__version__ = "0.1.0"
