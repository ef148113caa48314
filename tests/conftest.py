"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(work_detail_book, invoice_book, runtime_config):
        ...

源表/模板均用 openpyxl 现场构建，锚点位置刻意偏离A1，验证相对定位
"""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook
from openpyxl.formatting.rule import CellIsRule
from openpyxl.styles import PatternFill
from openpyxl.worksheet.datavalidation import DataValidation

from invoicer.config import InvoiceLayout, RuntimeConfig
from invoicer.config.runtime_config import DocumentsConfig
from invoicer.grid import DocumentStore, Sheet
from invoicer.models import BillingPeriod, LineItem, WorkRecord

WORK_DETAIL_ID = "work_detail"
INVOICE_ID = "invoice"

# (品名, 所要単位, 数量, 単位, 単価, 小計)
SAMPLE_ROWS = [
    ("材料費", 1, 5, "個", 100, 500),
    ("工程管理", 1, 1, "式", 50, 50),
]


# ============================================================================
# 构建辅助
# ============================================================================

def build_work_detail_sheet(
    ws,
    rows,
    *,
    origin: tuple[int, int] = (4, 2),
    blank_after_header: int = 1,
    totals: tuple[float, float, float] = (550, 55, 605),
    trailing_rows=(),
) -> None:
    """
    按作业明细版式写入

    origin: 「項目名」所在 (行, 列)
    totals: (小计, 税, 合计)
    trailing_rows: 终止项之后的多余行（不应被读取）
    """
    r0, c0 = origin
    if r0 > 1:
        ws.cell(row=r0 - 1, column=c0, value="作業明細")
    headers = ["項目名", "所要単位", "備考", "数量", "単位", "単価", "小計"]
    for i, h in enumerate(headers):
        ws.cell(row=r0, column=c0 + i, value=h)

    row = r0 + 1 + blank_after_header
    for name, required_unit, amount, unit, unit_price, subtotal in list(rows) + list(trailing_rows):
        ws.cell(row=row, column=c0, value=name)
        ws.cell(row=row, column=c0 + 1, value=required_unit)
        ws.cell(row=row, column=c0 + 3, value=amount)
        ws.cell(row=row, column=c0 + 4, value=unit)
        ws.cell(row=row, column=c0 + 5, value=unit_price)
        ws.cell(row=row, column=c0 + 6, value=subtotal)
        row += 1

    # 合计块：小计/消費税/合計 自上而下
    label_col = c0 + 5
    subtotal, tax, total = totals
    row += 1
    for label, value in (("小計", subtotal), ("消費税", tax), ("合計", total)):
        ws.cell(row=row, column=label_col, value=label)
        ws.cell(row=row, column=label_col + 1, value=value)
        row += 1


def build_invoice_template(ws) -> None:
    """请求书模板（含公式列与合并单元格）"""
    ws["B2"] = "請求書"
    ws["E3"] = "請求日: "
    ws["E4"] = "請求番号: "

    ws["B8"] = "品 番 • 品 名"
    ws.merge_cells("B8:C8")
    ws["D8"] = "数 量"
    ws["E8"] = "単位"
    ws["F8"] = "単 価"
    ws["G8"] = "金 額"
    for r in range(9, 16):
        ws[f"G{r}"] = f"=D{r}*F{r}"

    ws["B20"] = "備考"
    ws["B21"] = "お支払期限: "


def decorate_template(ws) -> None:
    """sheet级设置：视图/打印区域/页眉/条件格式/数据验证"""
    ws.sheet_view.showGridLines = False
    ws.sheet_view.zoomScale = 85
    ws.freeze_panes = "A9"
    ws.print_area = "A1:H30"
    ws.print_title_rows = "8:8"
    ws.oddHeader.center.text = "請求書"
    ws.conditional_formatting.add(
        "D9:D15",
        CellIsRule(operator="lessThan", formula=["0"], fill=PatternFill("solid", start_color="FFC7CE")),
    )
    dv = DataValidation(type="list", formula1='"個,式,回"', allow_blank=True)
    dv.add("E9:E15")
    ws.add_data_validation(dv)


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def layout() -> InvoiceLayout:
    """内置版式"""
    return InvoiceLayout()


@pytest.fixture
def runtime_config(tmp_path: Path) -> RuntimeConfig:
    """运行期配置（存储目录指向临时目录）"""
    return RuntimeConfig(
        storage_dir=tmp_path,
        documents=DocumentsConfig(work_detail_id=WORK_DETAIL_ID, invoice_id=INVOICE_ID),
    )


@pytest.fixture
def store(runtime_config: RuntimeConfig) -> DocumentStore:
    return DocumentStore(runtime_config)


# ============================================================================
# 文档 Fixtures
# ============================================================================

@pytest.fixture
def work_detail_book(runtime_config: RuntimeConfig) -> Path:
    """作业明细文档：含 2024/5月分"""
    wb = Workbook()
    wb.active.title = "2024／4月分"
    build_work_detail_sheet(wb.active, [("旧材料", 1, 2, "個", 10, 20), ("工程管理", 1, 1, "式", 5, 5)])
    build_work_detail_sheet(wb.create_sheet("2024／5月分"), SAMPLE_ROWS)

    path = runtime_config.get_document_path(WORK_DETAIL_ID)
    wb.save(path)
    return path


@pytest.fixture
def invoice_book(runtime_config: RuntimeConfig) -> Path:
    """请求书文档：一覧 / テンプレート / 既存sheet"""
    wb = Workbook()
    wb.active.title = "一覧"
    build_invoice_template(wb.create_sheet("テンプレート"))
    wb.create_sheet("2024／4月分")

    path = runtime_config.get_document_path(INVOICE_ID)
    wb.save(path)
    return path


@pytest.fixture
def template_sheet() -> Sheet:
    """内存中的模板sheet"""
    wb = Workbook()
    ws = wb.active
    ws.title = "テンプレート"
    build_invoice_template(ws)
    return Sheet(wb, ws)


# ============================================================================
# 数据模型 Fixtures
# ============================================================================

@pytest.fixture
def sample_period() -> BillingPeriod:
    return BillingPeriod(year=2024, month=5)


@pytest.fixture
def sample_record() -> WorkRecord:
    """2024/5月分 作业明细"""
    return WorkRecord(
        name="2024/5月分",
        items=(
            LineItem(name="材料費", required_unit=1, unit_price=100, amount=5, unit="個", subtotal=500),
            LineItem(name="工程管理", required_unit=1, unit_price=50, amount=1, unit="式", subtotal=50),
        ),
        subtotal=550,
        tax=55,
        total=605,
    )
