"""Tests for document classification and emission."""

import logging

import pytest

from pinegrow_razor.config import ConverterConfig
from pinegrow_razor.core.documents import (
    DocumentKind,
    classify,
    convert_document,
    derive_route,
    output_path,
    page_body,
    render_page,
    render_partial,
)
from pinegrow_razor.core.markup import parse
from tests.samples import FOOTER_PARTIAL, HOME_PAGE, TEAM_PAGE


class TestClassify:
    def test_document_with_html_root_is_page(self) -> None:
        assert classify(parse("<html><body></body></html>")) is DocumentKind.PAGE

    def test_fragment_is_partial(self) -> None:
        assert classify(parse("<div>fragment</div>")) is DocumentKind.PARTIAL

    def test_uppercase_html_root_is_page(self) -> None:
        tree = parse("<HTML><BODY><p>x</p></BODY></HTML>")
        assert classify(tree) is DocumentKind.PAGE
        assert page_body(tree) == "<p>x</p>"


class TestPageBody:
    def test_uses_body_contents(self) -> None:
        assert page_body(parse("<html><head></head><body>\n  <p>x</p>\n</body></html>")) == "<p>x</p>"

    def test_falls_back_to_html_contents(self) -> None:
        assert page_body(parse("<html>\n  <main>y</main>\n</html>")) == "<main>y</main>"

    def test_fragment_uses_whole_tree(self) -> None:
        assert page_body(parse("\n  <p>a</p>\n  <p>b</p>\n")) == "<p>a</p>\n<p>b</p>"


@pytest.mark.parametrize(
    ("relative", "route"),
    [
        ("about-us/Team.html", "/about-us/team"),
        ("index.html", "/index"),
        ("blog\\MyPost.html", "/blog/my-post"),
        ("/nested/Deep/Page.html", "/nested/deep/page"),
    ],
)
def test_derive_route(relative: str, route: str) -> None:
    assert derive_route(relative) == route


class TestOutputPath:
    def test_page_goes_to_page_directory(self, config: ConverterConfig) -> None:
        assert output_path("about-us/Team.html", DocumentKind.PAGE, config) == "Pages/about-us/Team.razor"

    def test_partial_goes_to_component_directory(self, config: ConverterConfig) -> None:
        path = output_path("parts/site-footer.html", DocumentKind.PARTIAL, config)
        assert path == "Components/parts/SiteFooter.razor"

    def test_top_level_file(self, config: ConverterConfig) -> None:
        assert output_path("index.html", DocumentKind.PAGE, config) == "Pages/Index.razor"

    def test_custom_directories(self) -> None:
        config = ConverterConfig(page_directory="Web/Pages", component_directory="Web/Shared")
        assert output_path("a.html", DocumentKind.PAGE, config) == "Web/Pages/A.razor"
        assert output_path("a.html", DocumentKind.PARTIAL, config) == "Web/Shared/A.razor"


def test_render_page_with_layout() -> None:
    assert render_page("<p>x</p>", "/about", "MainLayout") == (
        '@layout MainLayout\n@page "/about"\n\n<p>x</p>\n\n@code {\n\n}\n'
    )


def test_render_page_without_layout() -> None:
    assert render_page("<p>x</p>", "/about", None) == '@page "/about"\n\n<p>x</p>\n\n@code {\n\n}\n'


def test_render_partial() -> None:
    assert render_partial("<p>x</p>") == "<p>x</p>\n\n@code {\n\n}\n"


class TestConvertDocument:
    def test_home_page(self, config: ConverterConfig) -> None:
        result = convert_document(HOME_PAGE, "index.html", config)

        assert result.kind is DocumentKind.PAGE
        assert result.route == "/index"
        assert [artifact.path for artifact in result.artifacts] == [
            "Components/HeroBanner.razor",
            "Pages/Index.razor",
        ]
        assert result.artifacts[1].content == (
            "@layout EmptyLayout\n"
            '@page "/index"\n'
            "\n"
            "<HeroBanner></HeroBanner>\n"
            '<EditForm action="/subscribe" method="post">\n'
            '  <InputCheckbox name="agree" checked=""></InputCheckbox>\n'
            "</EditForm>\n"
            "\n"
            "@code {\n"
            "\n"
            "}\n"
        )

    def test_home_page_component(self, config: ConverterConfig) -> None:
        result = convert_document(HOME_PAGE, "index.html", config)
        assert result.artifacts[0].content == (
            '<div class="hero">\n'
            '  <h1 data-pgc-edit="title[content]">@Title</h1>\n'
            '  <a href="@CtaHref" data-pgc-edit="cta[content, href]">@Cta</a>\n'
            "</div>\n"
            "\n"
            "@code {\n"
            "    [Parameter]\n"
            "    public string Title { get; set; }\n"
            "\n"
            "    [Parameter]\n"
            "    public RenderFragment Cta { get; set; }\n"
            "\n"
            "    [Parameter]\n"
            "    public string CtaHref { get; set; }\n"
            "}\n"
        )

    def test_at_signs_are_escaped(self, config: ConverterConfig) -> None:
        result = convert_document(TEAM_PAGE, "about-us/Team.html", config)
        page = result.artifacts[-1]
        assert page.path == "Pages/about-us/Team.razor"
        assert '@page "/about-us/team"' in page.content
        assert "team@@example.com" in page.content

    def test_repeat_group_component(self, config: ConverterConfig) -> None:
        result = convert_document(TEAM_PAGE, "about-us/Team.html", config)
        (component,) = result.components
        assert component.template_name == "TeamList"
        assert component.schema.names == ["Members"]
        assert "public List<MembersItem> Members { get; set; }" in result.artifacts[0].content

    def test_partial_is_skipped_by_default(self, config: ConverterConfig) -> None:
        result = convert_document(FOOTER_PARTIAL, "parts/footer.html", config)
        assert result.kind is DocumentKind.PARTIAL
        assert result.route is None
        assert result.artifacts == []

    def test_partial_is_emitted_when_configured(self) -> None:
        config = ConverterConfig(treat_partials_as_components=True)
        result = convert_document(FOOTER_PARTIAL, "parts/footer.html", config)
        (artifact,) = result.artifacts
        assert artifact.path == "Components/parts/Footer.razor"
        assert artifact.content == '<footer class="site-footer">\n  <p>© Example</p>\n</footer>\n\n@code {\n\n}\n'

    def test_components_in_partials_are_still_exported(self, config: ConverterConfig) -> None:
        result = convert_document('<nav data-pgc-define="menu"></nav>', "parts/menu.html", config)
        assert [artifact.path for artifact in result.artifacts] == ["Components/Menu.razor"]

    def test_custom_layout(self) -> None:
        config = ConverterConfig(layout="MainLayout")
        result = convert_document("<html><body><p>x</p></body></html>", "x.html", config)
        assert result.artifacts[0].content.startswith('@layout MainLayout\n@page "/x"\n')

    def test_logs_found_document(self, config: ConverterConfig, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        convert_document(HOME_PAGE, "index.html", config)
        assert "Found index.html, generating Pages/Index.razor" in caplog.text
