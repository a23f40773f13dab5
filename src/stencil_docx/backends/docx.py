"""DOCX backend for document serialization."""
# pyright: reportUnknownVariableType=false, reportUnknownMemberType=false, reportPrivateUsage=false, reportUnknownArgumentType=false

from __future__ import annotations

import re
from io import BytesIO
from typing import TYPE_CHECKING, Any

from docx import Document
from docx.enum.section import WD_ORIENT, WD_SECTION
from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor, Twips

from stencil_docx import layout
from stencil_docx.logger import get_logger

if TYPE_CHECKING:
    from docx.document import Document as DocumentType
    from docx.section import Section as DocxSection
    from docx.styles.style import ParagraphStyle
    from docx.table import Table as DocxTable
    from docx.table import _Cell
    from docx.text.paragraph import Paragraph as DocxParagraph

# A4 in twips
PAGE_WIDTH = 11906
PAGE_HEIGHT = 16838
PAGE_MARGIN = 1440

HEADER_SHADING = "EEEEEE"
TOC_PLACEHOLDER = "Right-click and select Update Field to build the table of contents."

_ALIGNMENTS = {
    layout.Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    layout.Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    layout.Alignment.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
}

# Elements that follow w:outlineLvl inside w:pPr
_OUTLINE_SUCCESSORS = ("w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange")

_THEME_FONT_ATTRS = ("w:asciiTheme", "w:hAnsiTheme", "w:eastAsiaTheme", "w:cstheme")

# Control characters XML 1.0 does not allow in text
_XML_ILLEGAL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _xml_text(text: str) -> str:
    return _XML_ILLEGAL_CHARS.sub("", text)


class DocxBackend:
    """Backend for writing a document model as a .docx file."""

    def __init__(self) -> None:
        self.document: DocumentType | None = None
        self.style_names: dict[str, str] = {}  # style_id -> Word style name

    def render(self, document: layout.Document) -> bytes:
        """Serialize the document model to DOCX bytes."""
        self.document = Document()
        self.style_names = {}

        self._set_core_properties(document)
        for style_def in document.styles:
            self._add_style(style_def)

        for index, section in enumerate(document.sections):
            self._render_section(document, section, first=index == 0)

        buffer = BytesIO()
        self.document.save(buffer)
        return buffer.getvalue()

    def _set_core_properties(self, document: layout.Document) -> None:
        assert self.document is not None
        props = self.document.core_properties
        props.title = _xml_text(document.title)
        props.author = _xml_text(document.creator)
        props.last_modified_by = props.author

    def _add_style(self, style_def: layout.StyleDef) -> None:
        """Create or update a paragraph style from its definition."""
        assert self.document is not None
        styles = self.document.styles
        try:
            style: ParagraphStyle = styles[style_def.name]
        except KeyError:
            style = styles.add_style(style_def.name, WD_STYLE_TYPE.PARAGRAPH)
            style.base_style = styles["Normal"]
            style.next_paragraph_style = styles["Normal"]

        style.quick_style = style_def.quick_format
        font = style.font
        font.name = style_def.font
        font.size = Pt(style_def.size / 2)
        font.bold = style_def.bold
        # Built-in heading styles carry a theme colour and theme fonts
        font.color.rgb = RGBColor(0, 0, 0)
        r_fonts = style.element.get_or_add_rPr().rFonts
        if r_fonts is not None:
            for attr in _THEME_FONT_ATTRS:
                r_fonts.attrib.pop(qn(attr), None)

        paragraph_format = style.paragraph_format
        if style_def.spacing_before is not None:
            paragraph_format.space_before = Twips(style_def.spacing_before)
        if style_def.spacing_after is not None:
            paragraph_format.space_after = Twips(style_def.spacing_after)

        self._set_outline_level(style, style_def.outline_level)
        self.style_names[style_def.style_id] = style_def.name

    def _set_outline_level(self, style: ParagraphStyle, level: int | None) -> None:
        """Set (or clear) the outline level a TOC field uses to find headings."""
        p_pr = style.element.get_or_add_pPr()
        for existing in p_pr.findall(qn("w:outlineLvl")):
            p_pr.remove(existing)
        if level is None:
            return
        outline = OxmlElement("w:outlineLvl")
        outline.set(qn("w:val"), str(level - 1))  # zero-based in WordprocessingML
        p_pr.insert_element_before(outline, *_OUTLINE_SUCCESSORS)

    def _render_section(
        self, document: layout.Document, section: layout.Section, *, first: bool
    ) -> None:
        assert self.document is not None
        if first:
            docx_section = self.document.sections[0]
        else:
            docx_section = self.document.add_section(WD_SECTION.NEW_PAGE)
        self._set_page_layout(docx_section, section.orientation)

        for block in section.blocks:
            self._render_block(self.document, document, block)

        if section.footer is not None:
            footer = docx_section.footer
            footer.is_linked_to_previous = False
            for block in section.footer.blocks:
                self._render_block(footer, document, block)

    def _set_page_layout(self, section: DocxSection, orientation: layout.Orientation) -> None:
        """Apply A4 paper in the requested orientation."""
        if orientation is layout.Orientation.LANDSCAPE:
            section.orientation = WD_ORIENT.LANDSCAPE
            section.page_width = Twips(PAGE_HEIGHT)
            section.page_height = Twips(PAGE_WIDTH)
        else:
            section.orientation = WD_ORIENT.PORTRAIT
            section.page_width = Twips(PAGE_WIDTH)
            section.page_height = Twips(PAGE_HEIGHT)
        section.top_margin = Twips(PAGE_MARGIN)
        section.bottom_margin = Twips(PAGE_MARGIN)
        section.left_margin = Twips(PAGE_MARGIN)
        section.right_margin = Twips(PAGE_MARGIN)

    def _render_block(
        self, container: Any, document: layout.Document, block: layout.Block
    ) -> None:
        """Render one block into the document body or a footer."""
        if isinstance(block, layout.Heading):
            style_def = document.heading_style(block.level)
            style_name = style_def.name if style_def else f"Heading {block.level}"
            container.add_paragraph(_xml_text(block.text), style=style_name)
        elif isinstance(block, layout.Paragraph):
            style_name = self.style_names.get(block.style) if block.style else None
            p = container.add_paragraph(_xml_text(block.text), style=style_name)
            if block.alignment is not layout.Alignment.LEFT:
                p.alignment = _ALIGNMENTS[block.alignment]
        elif isinstance(block, layout.Table):
            self._render_table(container, block)
        elif isinstance(block, layout.PageBreak):
            container.add_paragraph().add_run().add_break(WD_BREAK.PAGE)
        elif isinstance(block, layout.TableOfContents):  # type: ignore[reportUnnecessaryIsInstance]
            self._render_toc(container, block)

    def _render_toc(self, container: Any, toc: layout.TableOfContents) -> None:
        """Insert a TOC field; the word processor fills it in on update."""
        low, high = toc.heading_range
        instruction = f'TOC \\o "{low}-{high}" \\z \\u'
        if toc.hyperlink:
            instruction += " \\h"
        self._add_field(container.add_paragraph(), instruction, TOC_PLACEHOLDER)

    def _render_table(self, container: Any, table_def: layout.Table) -> None:
        total_width = table_def.width or sum(table_def.column_widths)
        cols = len(table_def.column_widths)
        if container is self.document:
            table: DocxTable = container.add_table(rows=0, cols=cols)
        else:
            table = container.add_table(0, cols, Twips(total_width))

        if table_def.style:
            try:
                table.style = table_def.style
            except KeyError:
                get_logger().warning(f"Table style '{table_def.style}' not found, using default")

        table.autofit = False
        self._set_table_width(table, total_width)
        for column, width in zip(table.columns, table_def.column_widths):
            column.width = Twips(width)

        header_row = table_def.header_row
        for row_def in table_def.rows:
            row = table.add_row()
            if row_def is header_row:
                tbl_header = OxmlElement("w:tblHeader")
                row._tr.get_or_add_trPr().append(tbl_header)  # noqa: SLF001
            for cell, cell_def, width in zip(row.cells, row_def.cells, table_def.column_widths):
                cell.width = Twips(width)
                self._fill_cell(cell, cell_def)

    def _set_table_width(self, table: DocxTable, width: int) -> None:
        tbl_pr = table._tbl.tblPr  # noqa: SLF001
        tbl_w = tbl_pr.find(qn("w:tblW"))
        if tbl_w is None:
            tbl_w = OxmlElement("w:tblW")
            tbl_pr.append(tbl_w)
        tbl_w.set(qn("w:w"), str(width))
        tbl_w.set(qn("w:type"), "dxa")

    def _fill_cell(self, cell: _Cell, cell_def: layout.Cell) -> None:
        """Apply borders, shading and margins, then write the cell content."""
        tc_pr = cell._tc.get_or_add_tcPr()  # noqa: SLF001

        # Appended in schema order: tcBorders, shd, tcMar
        if not cell_def.borders:
            borders = OxmlElement("w:tcBorders")
            for edge in ("top", "left", "bottom", "right"):
                border = OxmlElement(f"w:{edge}")
                border.set(qn("w:val"), "none")
                border.set(qn("w:sz"), "0")
                border.set(qn("w:space"), "0")
                border.set(qn("w:color"), "auto")
                borders.append(border)
            tc_pr.append(borders)

        if cell_def.shaded:
            shading = OxmlElement("w:shd")
            shading.set(qn("w:val"), "clear")
            shading.set(qn("w:color"), "auto")
            shading.set(qn("w:fill"), HEADER_SHADING)
            tc_pr.append(shading)

        if cell_def.margins is not None:
            margins = OxmlElement("w:tcMar")
            for edge in ("top", "left", "bottom", "right"):
                margin = OxmlElement(f"w:{edge}")
                margin.set(qn("w:w"), str(getattr(cell_def.margins, edge)))
                margin.set(qn("w:type"), "dxa")
                margins.append(margin)
            tc_pr.append(margins)

        p = cell.paragraphs[0]
        if cell_def.alignment is not layout.Alignment.LEFT:
            p.alignment = _ALIGNMENTS[cell_def.alignment]
        if isinstance(cell_def.content, layout.PageNumber):
            self._add_field(p, "PAGE")
        else:
            run = p.add_run(_xml_text(cell_def.text))
            if cell_def.bold:
                run.bold = True

    def _add_field(
        self,
        paragraph: DocxParagraph,
        instruction: str,
        placeholder: str | None = None,
    ) -> None:
        """Add a complex field (PAGE, TOC, ...) to a paragraph."""
        run = paragraph.add_run()
        begin = OxmlElement("w:fldChar")
        begin.set(qn("w:fldCharType"), "begin")
        instr_text = OxmlElement("w:instrText")
        instr_text.set(qn("xml:space"), "preserve")
        instr_text.text = f" {instruction} "
        run._r.append(begin)  # noqa: SLF001
        run._r.append(instr_text)  # noqa: SLF001

        if placeholder:
            separate = OxmlElement("w:fldChar")
            separate.set(qn("w:fldCharType"), "separate")
            run._r.append(separate)  # noqa: SLF001
            paragraph.add_run(placeholder)

        end = OxmlElement("w:fldChar")
        end.set(qn("w:fldCharType"), "end")
        paragraph.add_run()._r.append(end)  # noqa: SLF001
