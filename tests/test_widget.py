from topmovers.api.widget import build_widget_html, widget_meta


def test_widget_html_embeds_assets():
    html = build_widget_html("render();", "body { margin: 0; }")

    assert html == (
        '<div id="topmovers-root"></div>\n'
        "<style>body { margin: 0; }</style>\n"
        '<script type="module">render();</script>'
    )


def test_widget_html_skips_empty_css():
    html = build_widget_html("render();", "")

    assert "<style>" not in html
    assert html.endswith('<script type="module">render();</script>')


def test_widget_meta_allows_alpha_vantage():
    meta = widget_meta("https://alphavantage.co")

    assert meta["openai/widgetPrefersBorder"] is True
    assert meta["openai/widgetDomain"] == "https://alphavantage.co"
    assert meta["openai/widgetCSP"]["connect_domains"] == ["https://www.alphavantage.co"]
