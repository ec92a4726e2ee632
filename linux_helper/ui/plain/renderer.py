"""
ui/plain/renderer.py
Prints a page once, with the current query and disclosure state applied.
"""

from rich import box
from rich.console import Group
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from linux_helper.content.pages import GUIDE_SLUGS, PAGES
from linux_helper.engine.page import PageExtra, PageModel
from linux_helper.models.disclosure import DisclosurePolicy
from linux_helper.models.records import DetailBlock

from .styles import create_record_panel, make_console


class PlainRenderer:
    def __init__(self, console=None):
        self.console = console or make_console()

    # --- HOME ---
    def render_home(self) -> None:
        home = PAGES["home"]
        self.console.print(f"[helper.title]{escape(home.title)}[/]")
        self.console.print(f"[helper.muted]{escape(home.blurb)}[/]")
        self.console.print()

        t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
        t.add_column("Page", style="helper.accent")
        t.add_column("Guide", style="helper.text")
        for slug in GUIDE_SLUGS:
            page = PAGES[slug]
            t.add_row(slug, f"{page.title}\n[helper.muted]{escape(page.blurb)}[/]")
        self.console.print(t)

    # --- PAGES ---
    def render_page(self, model: PageModel) -> None:
        spec = model.spec
        self.console.print(f"[helper.title]{escape(spec.title)}[/]")
        self.console.print(f"[helper.muted]{escape(spec.blurb)}[/]")

        if spec.policy is DisclosurePolicy.INDEPENDENT_TOGGLE:
            checked, total = model.progress
            self.console.print(f"[helper.muted]{checked}/{total} steps checked[/]")

        summary = model.summary
        if summary:
            self.console.print(f"[helper.muted]{summary}[/]")
        self.console.print()

        if model.is_empty:
            self.console.print(f"[warning]No results.[/] {escape(spec.empty_message)}")
        else:
            for record in model.results:
                self.console.print(self._record_panel(model, record))

        for extra in spec.extras:
            self.render_extra(extra)

    def render_extra(self, extra: PageExtra) -> None:
        self.console.print()
        self.console.print(f"[helper.title]{escape(extra.heading)}[/]")
        for title, lines in extra.items():
            body = Text("\n".join(lines), style="helper.text")
            self.console.print(create_record_panel(body, escape(title), False))

    def _record_panel(self, model: PageModel, record):
        if model.spec.policy is DisclosurePolicy.INDEPENDENT_TOGGLE:
            return self._checklist_panel(model, record)

        expanded = model.is_expanded(record.id)
        parts = [Text(record.summary, style="helper.text")]
        if expanded:
            parts.extend(self._detail(record.detail))
        marker = "▾" if expanded else "▸"
        return create_record_panel(
            Group(*parts), f"{marker} {escape(record.title)}", expanded
        )

    def _checklist_panel(self, model: PageModel, record):
        checked = model.is_expanded(record.id)
        box_mark = "[x]" if checked else "[ ]"
        title_style = "strike grey58" if checked else "bold green3"
        parts = [
            Text(f"{box_mark} Step {record.id + 1}: {record.title}", style=title_style),
            Text(record.summary, style="helper.text"),
            *self._detail(record.detail),
        ]
        return create_record_panel(Group(*parts), record.key, checked)

    def _detail(self, blocks: tuple[DetailBlock, ...]) -> list:
        out = []
        for block in blocks:
            out.append(Text(block.heading, style="helper.accent"))
            if block.text:
                out.append(Text(block.text, style="helper.text"))
            if block.code:
                out.append(
                    Syntax(block.code, block.language, word_wrap=True, line_numbers=False)
                )
        return out
