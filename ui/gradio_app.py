import gradio as gr
from typing import List

from roadmap.grouping import CategoryGroup
from roadmap.ordering import format_date
from roadmap.parsers.types import TimelineItem
from roadmap.pipeline import PageState, TimelinePipeline
from roadmap.timeline import ALL, category_options, filter_items, status_options

TYPE_BADGE = {"challenge": "課題", "book": "書籍"}


# ---- renderers ----
def render_item(item: TimelineItem) -> str:
    lines = [f"### {item.title}  `{TYPE_BADGE[item.type]}`"]
    if item.author:
        lines.append(f"著者: {item.author}")
    if item.description:
        lines.append(item.description)
    lines.append(
        f"`{item.category}` · 優先度: {item.priority} · {item.status} · 難易度: {item.difficulty}/5"
    )
    if item.tags:
        lines.append(" ".join(f"#{t}" for t in item.tags))
    meta = []
    if item.start_date:
        meta.append(f"開始: {format_date(item.start_date)}")
    if item.end_date:
        meta.append(f"終了: {format_date(item.end_date)}")
    if item.timeframe:
        meta.append(f"期間: {item.timeframe}")
    if item.pages:
        meta.append(f"ページ数: {item.pages}ページ")
    if item.url:
        meta.append(f"[リンク]({item.url})")
    if meta:
        lines.append(" | ".join(meta))
    return "\n\n".join(lines)


def render_timeline_markdown(items: List[TimelineItem]) -> str:
    header = f"## タイムライン ({len(items)}件)"
    if not items:
        return f"{header}\n\n条件に合う項目が見つかりませんでした"
    return header + "\n\n" + "\n\n---\n\n".join(render_item(i) for i in items)


def render_grouped_markdown(groups: List[CategoryGroup]) -> str:
    if not groups:
        return "表示できるデータがありません"
    parts = []
    for g in groups:
        block = [f"## {g.category}"]
        for e in g.entries:
            span = " → ".join(s for s in (e.start_date, e.end_date) if s)
            block.append(f"- **{e.title}**" + (f" ({span})" if span else ""))
            if e.description:
                block.append(f"  {e.description}")
        if g.books:
            block.append("**おすすめの本**")
            for b in g.books:
                title = f"[{b.title}]({b.url})" if b.url else b.title
                block.append(f"- {title}" + (f" / {b.author}" if b.author else ""))
        parts.append("\n".join(block))
    return "\n\n".join(parts)


def render_status(state: PageState) -> str:
    if state.status == "loading":
        return "⏳ データを読み込み中..."
    if state.status == "error":
        return f"❌ **エラーが発生しました**\n\n{state.message}"
    if state.banner:
        return f"⚠️ {state.message}"
    return ""


def render_body(state: PageState, category: str = ALL, status: str = ALL, grouped: bool = False) -> str:
    if state.status in ("loading", "error"):
        return ""
    if grouped:
        return render_grouped_markdown(state.groups)
    return render_timeline_markdown(filter_items(state.items, category, status))


def launch_ui(pipeline: TimelinePipeline):
    timeline_view = pipeline.cfg.view == "timeline"

    with gr.Blocks(title="Life Challenges Timeline") as app:
        gr.Markdown("# Life Challenges Timeline")
        gr.Markdown("人生の課題と学習計画をタイムライン形式で管理")

        page = gr.State(None)
        with gr.Row(visible=timeline_view):
            category = gr.Dropdown(choices=[ALL], value=ALL, label="カテゴリ")
            status = gr.Dropdown(choices=[ALL], value=ALL, label="ステータス")
        reload_btn = gr.Button("再読み込み")

        banner = gr.Markdown("")
        body = gr.Markdown("")

        async def on_load():
            yield None, gr.update(), gr.update(), render_status(PageState(status="loading")), ""
            state = await pipeline.page_state()
            yield (
                state,
                gr.update(choices=category_options(state.items), value=ALL),
                gr.update(choices=status_options(state.items), value=ALL),
                render_status(state),
                render_body(state, grouped=not timeline_view),
            )

        def on_filter(state, cat, st):
            if state is None:
                return ""
            return render_body(state, cat or ALL, st or ALL, grouped=not timeline_view)

        outputs = [page, category, status, banner, body]
        app.load(on_load, None, outputs)
        reload_btn.click(on_load, None, outputs, show_progress=True)
        category.change(on_filter, [page, category, status], body)
        status.change(on_filter, [page, category, status], body)

    app.launch()
