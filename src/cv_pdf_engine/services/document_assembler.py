"""Two-column CV document assembly.

A :class:`DocumentAssembler` renders one language variant of a CV record
into PDF bytes. Rendering is a single sequential pass through a fixed set
of states::

    INITIALIZING -> RENDERING_SIDEBAR -> RENDERING_MAIN_HEADER
        -> RENDERING_SECTION (experience ... publications) -> FINALIZING -> DONE

Every drawing routine takes the :class:`LayoutState`, reads the current
``y`` of its region, draws, and returns the new ``y``. The sidebar and the
main column paginate independently; the main column starts at the top of
whichever page the sidebar finished on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from enum import StrEnum
from pathlib import Path

from fpdf import FPDF

from cv_pdf_engine.constants.layout_constants import (
    ACCENT_COLOR,
    AVATAR_SIZE,
    BIO_LINE_HEIGHT,
    BIO_MAX_LINES,
    BIO_SIZE,
    BODY_LINE_HEIGHT,
    BODY_SIZE,
    BULLET,
    DEFAULT_SITE_URL,
    DIVIDER_THICKNESS,
    DIVIDER_TO_CONTENT,
    DOCUMENT_CREATION_DATE,
    ENTRY_META_SIZE,
    ENTRY_TITLE_LINE_HEIGHT,
    ENTRY_TITLE_SIZE,
    LABEL_SIZE,
    LINK_LINE_HEIGHT,
    LINK_SIZE,
    MAIN_FLOOR,
    MAIN_MIN_BULLET_BODY,
    MAIN_WIDTH,
    MAIN_X,
    MAX_PROJECTS,
    MAX_SIDEBAR_ROLES,
    MUTED_COLOR,
    NAME_SIZE,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    PARAGRAPH_LINE_HEIGHT,
    PARAGRAPH_SIZE,
    PUBLICATIONS_MIN_SPACE,
    QR_SIZE,
    SECTION_TITLE_SIZE,
    SIDEBAR_BODY_SIZE,
    SIDEBAR_BULLET_WIDTH,
    SIDEBAR_HEADING_SIZE,
    SIDEBAR_LINE_HEIGHT,
    SIDEBAR_MARGIN,
    SIDEBAR_MIN_BULLET_BODY,
    SIDEBAR_TEXT_WIDTH,
    SIDEBAR_WIDTH,
    TEXT_DARK_COLOR,
    TEXT_LIGHT_COLOR,
    TITLE_TO_DIVIDER,
    WHITE_COLOR,
)
from cv_pdf_engine.constants.translations import (
    DEPLOY_LABEL,
    SOURCE_LABEL,
    section_title,
    translate_language_term,
)
from cv_pdf_engine.layout.assets import EmbeddedImage, embed_image, load_image, make_qr_png
from cv_pdf_engine.layout.cursor import Region
from cv_pdf_engine.layout.fonts import FontFaces, register_fonts
from cv_pdf_engine.layout.links import attach_link, link_rect_for_text
from cv_pdf_engine.layout.page_flow import Color, PageFlowManager
from cv_pdf_engine.layout.text import (
    hanging_indent_lines,
    justify_line,
    truncate_with_ellipsis,
    wrap_text,
)
from cv_pdf_engine.models.cv import CvRecord
from cv_pdf_engine.models.layout import LayoutState
from cv_pdf_engine.services.cv_data import localized
from cv_pdf_engine.utils.dates import date_label
from cv_pdf_engine.utils.urls import display_url, profile_username

logger = logging.getLogger(__name__)

__all__ = [
    "MAIN_SECTIONS",
    "AssemblerState",
    "DocumentAssembler",
    "draw_bullet",
    "draw_labeled_url",
    "draw_section_header",
    "draw_text_line",
    "draw_wrapped",
    "draw_wrapped_link",
    "render_cv_pdf",
]


class AssemblerState(StrEnum):
    INITIALIZING = "initializing"
    RENDERING_SIDEBAR = "rendering_sidebar"
    RENDERING_MAIN_HEADER = "rendering_main_header"
    RENDERING_SECTION = "rendering_section"
    FINALIZING = "finalizing"
    DONE = "done"


MAIN_SECTIONS = (
    "experience",
    "education",
    "training",
    "hard_skills",
    "soft_skills",
    "languages",
    "publications",
)


# -----------------------------------------------------------------------
# Drawing routines


def _region_x(region: Region) -> float:
    return SIDEBAR_MARGIN if region is Region.SIDEBAR else MAIN_X


def draw_text_line(
    state: LayoutState,
    region: Region,
    text: str | None,
    *,
    size: float,
    color: Color,
    bold: bool = False,
    line_height: float | None = None,
    x: float | None = None,
) -> float:
    """Draw one unwrapped line and return the region's new ``y``."""
    cursor = state.cursor
    if not text:
        return cursor.y(region)
    height = size * 1.4 if line_height is None else line_height
    cursor.ensure_space(height, region)
    state.flow.draw_text(
        _region_x(region) if x is None else x,
        cursor.y(region),
        text,
        state.fonts.pick(bold),
        size,
        color,
    )
    return cursor.advance(height, region)


def draw_wrapped(
    state: LayoutState,
    region: Region,
    text: str | None,
    *,
    max_width: float,
    size: float,
    color: Color,
    line_height: float,
    bold: bool = False,
    justify: bool = False,
    center: bool = False,
) -> float:
    """Draw *text* wrapped to *max_width*, optionally justified or centered.

    The last line of a justified paragraph stays ragged.
    """
    cursor = state.cursor
    font = state.fonts.pick(bold)
    lines = wrap_text(text, max_width, size, font)
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if justify and index < last:
            line = justify_line(line, max_width, size, font)
        x = _region_x(region)
        if center:
            x += max(0.0, (max_width - font.measure(line, size)) / 2)
        cursor.ensure_space(line_height, region)
        state.flow.draw_text(x, cursor.y(region), line, font, size, color)
        cursor.advance(line_height, region)
    return cursor.y(region)


def draw_bullet(
    state: LayoutState,
    region: Region,
    text: str | None,
    *,
    max_width: float,
    size: float,
    color: Color,
    line_height: float,
    min_body_width: float,
) -> float:
    """Draw a bulleted entry whose continuation lines hang under its first word."""
    cursor = state.cursor
    font = state.fonts.regular
    lines, indent = hanging_indent_lines(text, BULLET, max_width, size, font, min_body_width)
    x = _region_x(region)
    for index, line in enumerate(lines):
        cursor.ensure_space(line_height, region)
        if index == 0:
            state.flow.draw_text(x, cursor.y(region), BULLET + line, font, size, color)
        else:
            state.flow.draw_text(x + indent, cursor.y(region), line, font, size, color)
        cursor.advance(line_height, region)
    return cursor.y(region)


def draw_wrapped_link(
    state: LayoutState,
    text: str | None,
    url: str | None,
    *,
    size: float,
    color: Color,
    line_height: float,
    bold: bool = False,
) -> float:
    """Draw wrapped main-column text with a link box around every line."""
    cursor = state.cursor
    font = state.fonts.pick(bold)
    for line in wrap_text(text, MAIN_WIDTH, size, font):
        cursor.ensure_space(line_height, Region.MAIN)
        baseline = cursor.main_y
        state.flow.draw_text(MAIN_X, baseline, line, font, size, color)
        rect = link_rect_for_text(MAIN_X, baseline, font.measure(line, size), size)
        attach_link(state, rect, url)
        cursor.advance(line_height, Region.MAIN)
    return cursor.main_y


def draw_labeled_url(
    state: LayoutState,
    label: str,
    url: str | None,
    *,
    size: float = LINK_SIZE,
    line_height: float = LINK_LINE_HEIGHT,
) -> float:
    """Draw ``label url`` with the protocol-less URL wrapped and clickable."""
    cursor = state.cursor
    target = (url or "").strip()
    if not target:
        return cursor.main_y

    font = state.fonts.regular
    label_text = f"{label.strip()} "
    label_width = font.measure(label_text, size)
    url_x = MAIN_X + label_width
    available = max(40.0, MAIN_WIDTH - label_width)
    for index, line in enumerate(wrap_text(display_url(target), available, size, font)):
        cursor.ensure_space(line_height, Region.MAIN)
        baseline = cursor.main_y
        if index == 0:
            state.flow.draw_text(MAIN_X, baseline, label_text, font, size, MUTED_COLOR)
        state.flow.draw_text(url_x, baseline, line, font, size, ACCENT_COLOR)
        rect = link_rect_for_text(url_x, baseline, font.measure(line, size), size)
        attach_link(state, rect, target)
        cursor.advance(line_height, Region.MAIN)
    return cursor.main_y


def draw_section_header(state: LayoutState, title: str, *, size: float = SECTION_TITLE_SIZE) -> float:
    """Draw a main-column title with the accent divider hugging its baseline."""
    cursor = state.cursor
    divider_under_baseline = size * 0.35
    needed = divider_under_baseline + TITLE_TO_DIVIDER + DIVIDER_THICKNESS + DIVIDER_TO_CONTENT
    cursor.ensure_space(needed, Region.MAIN)

    title_y = cursor.main_y
    state.flow.draw_text(MAIN_X, title_y, title, state.fonts.bold, size, TEXT_DARK_COLOR)
    divider_y = title_y - divider_under_baseline - TITLE_TO_DIVIDER
    state.flow.draw_line(MAIN_X, divider_y, MAIN_X + MAIN_WIDTH, divider_y, DIVIDER_THICKNESS, ACCENT_COLOR)
    return cursor.advance(title_y - (divider_y - DIVIDER_TO_CONTENT), Region.MAIN)


def _draw_sidebar_heading(state: LayoutState, key: str) -> float:
    draw_text_line(
        state,
        Region.SIDEBAR,
        section_title(key, state.lang),
        size=SIDEBAR_HEADING_SIZE,
        bold=True,
        color=WHITE_COLOR,
    )
    return state.cursor.advance(5, Region.SIDEBAR)


def _draw_sidebar_image(state: LayoutState, image: EmbeddedImage, size: float, reserve: float) -> None:
    cursor = state.cursor
    cursor.ensure_space(size + reserve, Region.SIDEBAR)
    x = (SIDEBAR_WIDTH - size) / 2
    state.flow.draw_image(image, x, cursor.sidebar_y - size, size, size)


# -----------------------------------------------------------------------
# Assembler


class DocumentAssembler:
    """Renders one language variant of a CV record.

    Args:
        cv: The CV record, never mutated.
        lang: Output language, ``"es"`` or ``"en"``.
        faces: TrueType faces to register; defaults to the core face.
        public_dir: Directory the avatar path in ``basics.image`` is relative to.
        today: Render date for "in progress" detection.
    """

    def __init__(
        self,
        cv: CvRecord,
        lang: str,
        *,
        faces: FontFaces | None = None,
        public_dir: Path | None = None,
        today: date | None = None,
    ) -> None:
        self.cv = cv
        self.lang = lang
        self.faces = faces or FontFaces()
        self.public_dir = public_dir
        self.today = today or date.today()
        self.state = AssemblerState.INITIALIZING
        self.transitions: list[str] = [self.state.value]
        self.layout: LayoutState | None = None
        self._pdf: FPDF | None = None

    def _enter(self, state: AssemblerState, detail: str | None = None) -> None:
        self.state = state
        self.transitions.append(f"{state.value}:{detail}" if detail else state.value)

    def render(self) -> bytes:
        """Run every state once and return the serialized PDF."""
        if self.state is not AssemblerState.INITIALIZING:
            msg = "DocumentAssembler.render() can only run once"
            raise RuntimeError(msg)

        layout = self._initialize()

        self._enter(AssemblerState.RENDERING_SIDEBAR)
        self._render_sidebar(layout)

        self._enter(AssemblerState.RENDERING_MAIN_HEADER)
        self._render_main_header(layout)

        renderers: dict[str, Callable[[LayoutState], None]] = {
            "experience": self._render_experience,
            "education": self._render_education,
            "training": self._render_training,
            "hard_skills": self._render_hard_skills,
            "soft_skills": self._render_soft_skills,
            "languages": self._render_languages,
            "publications": self._render_publications,
        }
        for section in MAIN_SECTIONS:
            self._enter(AssemblerState.RENDERING_SECTION, section)
            renderers[section](layout)

        self._enter(AssemblerState.FINALIZING)
        data = bytes(self._pdf.output())
        logger.debug(
            "Rendered %s CV: %d pages, %d links",
            self.lang,
            layout.flow.page_count,
            len(layout.links),
        )
        self._enter(AssemblerState.DONE)
        return data

    def _initialize(self) -> LayoutState:
        pdf = FPDF(orientation="P", unit="pt", format=(PAGE_WIDTH, PAGE_HEIGHT))
        pdf.set_auto_page_break(False)
        pdf.set_creation_date(DOCUMENT_CREATION_DATE)
        name = (self.cv.basics.name or "").strip()
        if name:
            pdf.set_title(f"{name} - CV")
            pdf.set_author(name)

        fonts = register_fonts(pdf, self.faces)
        flow = PageFlowManager(pdf)
        flow.new_page()
        self._pdf = pdf
        self.layout = LayoutState(lang=self.lang, today=self.today, flow=flow, fonts=fonts)
        return self.layout

    # -- sidebar --------------------------------------------------------

    def _render_sidebar(self, layout: LayoutState) -> None:
        self._render_avatar(layout)
        self._render_about(layout)
        self._render_roles(layout)
        self._render_portfolio(layout)
        self._render_contact(layout)

    def _render_avatar(self, layout: LayoutState) -> None:
        image_path = (self.cv.basics.image or "").strip()
        if not image_path or self.public_dir is None:
            return
        avatar = load_image(self.public_dir / image_path.lstrip("/"))
        if avatar is None:
            return
        _draw_sidebar_image(layout, avatar, AVATAR_SIZE, 25)
        layout.cursor.advance(AVATAR_SIZE + 18, Region.SIDEBAR)

    def _render_about(self, layout: LayoutState) -> None:
        _draw_sidebar_heading(layout, "about")
        cursor = layout.cursor
        font = layout.fonts.regular
        lines = wrap_text(localized(self.cv.basics.summary, self.lang), SIDEBAR_TEXT_WIDTH, BIO_SIZE, font)
        for line in truncate_with_ellipsis(lines, BIO_MAX_LINES, SIDEBAR_TEXT_WIDTH, BIO_SIZE, font):
            x = SIDEBAR_MARGIN + max(0.0, (SIDEBAR_TEXT_WIDTH - font.measure(line, BIO_SIZE)) / 2)
            cursor.ensure_space(BIO_LINE_HEIGHT, Region.SIDEBAR)
            layout.flow.draw_text(x, cursor.sidebar_y, line, font, BIO_SIZE, TEXT_LIGHT_COLOR)
            cursor.advance(BIO_LINE_HEIGHT, Region.SIDEBAR)
        cursor.advance(8, Region.SIDEBAR)

    def _render_roles(self, layout: LayoutState) -> None:
        _draw_sidebar_heading(layout, "roles")
        for work in self.cv.work[:MAX_SIDEBAR_ROLES]:
            role = localized(work.position, self.lang)
            if not role:
                continue
            company = (work.name or "").strip()
            draw_bullet(
                layout,
                Region.SIDEBAR,
                f"{role} {company}" if company else role,
                max_width=SIDEBAR_BULLET_WIDTH,
                size=SIDEBAR_BODY_SIZE,
                color=TEXT_LIGHT_COLOR,
                line_height=SIDEBAR_LINE_HEIGHT,
                min_body_width=SIDEBAR_MIN_BULLET_BODY,
            )
        layout.cursor.advance(8, Region.SIDEBAR)

    def _render_portfolio(self, layout: LayoutState) -> None:
        _draw_sidebar_heading(layout, "portfolio")
        site_url = (self.cv.basics.url or "").strip() or DEFAULT_SITE_URL
        qr_image = embed_image(make_qr_png(site_url), "png")
        if qr_image is not None:
            _draw_sidebar_image(layout, qr_image, QR_SIZE, 35)
            layout.cursor.advance(QR_SIZE + 10, Region.SIDEBAR)
        layout.cursor.advance(8, Region.SIDEBAR)

    def _render_contact(self, layout: LayoutState) -> None:
        _draw_sidebar_heading(layout, "contact")
        basics = self.cv.basics
        font = layout.fonts.regular
        for line in wrap_text(basics.email, SIDEBAR_BULLET_WIDTH, SIDEBAR_BODY_SIZE, font):
            draw_text_line(
                layout,
                Region.SIDEBAR,
                BULLET + line,
                size=SIDEBAR_BODY_SIZE,
                color=TEXT_LIGHT_COLOR,
                line_height=SIDEBAR_LINE_HEIGHT,
            )
        phone = (basics.phone or "").strip()
        if phone:
            draw_text_line(
                layout,
                Region.SIDEBAR,
                BULLET + phone,
                size=SIDEBAR_BODY_SIZE,
                color=TEXT_LIGHT_COLOR,
                line_height=SIDEBAR_LINE_HEIGHT,
            )
        for profile in basics.profiles:
            network = (profile.network or "").strip()
            username = profile_username(profile.url)
            if network and username:
                draw_bullet(
                    layout,
                    Region.SIDEBAR,
                    f"{network}: {username}",
                    max_width=SIDEBAR_BULLET_WIDTH,
                    size=SIDEBAR_BODY_SIZE,
                    color=TEXT_LIGHT_COLOR,
                    line_height=SIDEBAR_LINE_HEIGHT,
                    min_body_width=SIDEBAR_MIN_BULLET_BODY,
                )

    # -- main column ----------------------------------------------------

    def _render_main_header(self, layout: LayoutState) -> None:
        draw_text_line(layout, Region.MAIN, self.cv.basics.name, size=NAME_SIZE, bold=True, color=TEXT_DARK_COLOR)
        layout.cursor.advance(4, Region.MAIN)
        draw_wrapped(
            layout,
            Region.MAIN,
            localized(self.cv.basics.label, self.lang),
            max_width=MAIN_WIDTH,
            size=LABEL_SIZE,
            color=ACCENT_COLOR,
            line_height=BODY_LINE_HEIGHT,
            center=True,
        )
        layout.cursor.advance(8, Region.MAIN)

    def _entry_header(self, name: str | None, start: str | None, end: str | None) -> str:
        when = date_label(start, end, self.today, self.lang)
        return " | ".join(part for part in ((name or "").strip(), when) if part)

    def _draw_paragraph(self, layout: LayoutState, text: str) -> None:
        draw_wrapped(
            layout,
            Region.MAIN,
            text,
            max_width=MAIN_WIDTH,
            size=PARAGRAPH_SIZE,
            color=TEXT_DARK_COLOR,
            line_height=PARAGRAPH_LINE_HEIGHT,
            justify=True,
        )

    def _render_experience(self, layout: LayoutState) -> None:
        cursor = layout.cursor
        draw_section_header(layout, section_title("experience", self.lang))
        for work in self.cv.work:
            header = self._entry_header(work.name, work.start_date, work.end_date)
            if header:
                cursor.ensure_space(30, Region.MAIN)
                draw_text_line(
                    layout,
                    Region.MAIN,
                    header,
                    size=ENTRY_TITLE_SIZE,
                    bold=True,
                    color=TEXT_DARK_COLOR,
                    line_height=ENTRY_TITLE_LINE_HEIGHT,
                )
            draw_text_line(
                layout,
                Region.MAIN,
                localized(work.position, self.lang),
                size=ENTRY_META_SIZE,
                color=MUTED_COLOR,
                line_height=PARAGRAPH_LINE_HEIGHT,
            )
            self._draw_paragraph(layout, localized(work.summary, self.lang))
            cursor.advance(10, Region.MAIN)
        cursor.advance(6, Region.MAIN)

    def _render_education(self, layout: LayoutState) -> None:
        cursor = layout.cursor
        draw_section_header(layout, section_title("education", self.lang))
        for education in self.cv.education:
            header = self._entry_header(education.institution, education.start_date, education.end_date)
            cursor.ensure_space(34, Region.MAIN)
            draw_wrapped(
                layout,
                Region.MAIN,
                header,
                max_width=MAIN_WIDTH,
                size=ENTRY_TITLE_SIZE,
                color=TEXT_DARK_COLOR,
                line_height=ENTRY_TITLE_LINE_HEIGHT,
                bold=True,
            )
            cursor.advance(2, Region.MAIN)
            draw_wrapped(
                layout,
                Region.MAIN,
                localized(education.area, self.lang),
                max_width=MAIN_WIDTH,
                size=ENTRY_META_SIZE,
                color=MUTED_COLOR,
                line_height=PARAGRAPH_LINE_HEIGHT,
            )
            cursor.advance(8, Region.MAIN)
        cursor.advance(6, Region.MAIN)

    def _render_training(self, layout: LayoutState) -> None:
        projects = [p for p in self.cv.projects[:MAX_PROJECTS] if (p.name or "").strip()]
        if not projects:
            return
        cursor = layout.cursor
        draw_section_header(layout, section_title("training", self.lang))
        for project in projects:
            cursor.ensure_space(30, Region.MAIN)
            draw_text_line(
                layout,
                Region.MAIN,
                project.name.strip(),
                size=ENTRY_TITLE_SIZE,
                bold=True,
                color=TEXT_DARK_COLOR,
                line_height=ENTRY_TITLE_LINE_HEIGHT,
            )
            self._draw_paragraph(layout, localized(project.description, self.lang))

            deploy = (project.url or "").strip()
            source = (project.github or "").strip()
            draw_labeled_url(layout, DEPLOY_LABEL, deploy)
            if source != deploy:
                draw_labeled_url(layout, SOURCE_LABEL, source)
            cursor.advance(10, Region.MAIN)
        cursor.advance(6, Region.MAIN)

    def _render_hard_skills(self, layout: LayoutState) -> None:
        names = [s.name.strip() for s in self.cv.skills if s.name and s.name.strip()]
        draw_section_header(layout, section_title("hard_skills", self.lang))
        draw_wrapped(
            layout,
            Region.MAIN,
            ", ".join(names),
            max_width=MAIN_WIDTH,
            size=BODY_SIZE,
            color=TEXT_DARK_COLOR,
            line_height=BODY_LINE_HEIGHT,
        )
        layout.cursor.advance(6, Region.MAIN)

    def _render_soft_skills(self, layout: LayoutState) -> None:
        skills = [s for s in self.cv.soft_skills if s.strip()]
        draw_section_header(layout, section_title("soft_skills", self.lang))
        for skill in skills:
            draw_bullet(
                layout,
                Region.MAIN,
                skill,
                max_width=MAIN_WIDTH,
                size=BODY_SIZE,
                color=TEXT_DARK_COLOR,
                line_height=BODY_LINE_HEIGHT,
                min_body_width=MAIN_MIN_BULLET_BODY,
            )
        layout.cursor.advance(6, Region.MAIN)

    def _render_languages(self, layout: LayoutState) -> None:
        entries = []
        for item in self.cv.languages:
            language = translate_language_term(item.language, self.lang)
            fluency = translate_language_term(item.fluency, self.lang)
            if language:
                entries.append(f"{language} - {fluency}" if fluency else language)
        draw_section_header(layout, section_title("languages", self.lang))
        for entry in entries:
            draw_text_line(layout, Region.MAIN, entry, size=BODY_SIZE, color=TEXT_DARK_COLOR, line_height=11)
        layout.cursor.advance(12, Region.MAIN)

    def _render_publications(self, layout: LayoutState) -> None:
        cursor = layout.cursor
        if not self.cv.publications:
            return
        if cursor.main_y - PUBLICATIONS_MIN_SPACE <= MAIN_FLOOR:
            logger.debug("Skipping publications: %.1fpt left on page", cursor.main_y)
            return
        draw_section_header(layout, section_title("publications", self.lang))
        for publication in self.cv.publications:
            title = localized(publication.name, self.lang).strip()
            released = (publication.release_date or "").strip()[:7]
            publisher = (publication.publisher or "").strip()

            cursor.ensure_space(26, Region.MAIN)
            draw_wrapped_link(
                layout,
                " | ".join(part for part in (title, released) if part),
                publication.url,
                size=ENTRY_TITLE_SIZE,
                color=TEXT_DARK_COLOR,
                line_height=ENTRY_TITLE_LINE_HEIGHT,
                bold=True,
            )
            cursor.advance(6, Region.MAIN)
            if publisher:
                cursor.ensure_space(12, Region.MAIN)
                draw_wrapped_link(
                    layout,
                    publisher,
                    publication.url,
                    size=LINK_SIZE,
                    color=ACCENT_COLOR,
                    line_height=LINK_LINE_HEIGHT,
                )
                cursor.advance(6, Region.MAIN)
            cursor.advance(6, Region.MAIN)


def render_cv_pdf(
    cv: CvRecord,
    lang: str,
    *,
    faces: FontFaces | None = None,
    public_dir: Path | None = None,
    today: date | None = None,
) -> bytes:
    """Render one language variant of *cv* to PDF bytes.

    Each call builds its own document and layout state, so calls for
    different languages share nothing mutable.
    """
    return DocumentAssembler(cv, lang, faces=faces, public_dir=public_dir, today=today).render()
