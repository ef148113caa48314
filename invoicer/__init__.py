"""
请求书生成系统 - 核心模块

模块结构：
- config/     运行期配置与版式规范
- models/     数据模型定义
- grid/       表格访问（列号换算/单元格导航/锚点查找/文档存取）
- extract/    作业明细提取
- doc_gen/    请求书生成
- pipeline/   表单提交事件处理
"""

__version__ = "0.1.0"
