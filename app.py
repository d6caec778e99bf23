import gradio as gr
from functools import partial

from typed_records.config import AppSettings
from typed_records.handlers import apply_view, load_records_with_preview

settings = AppSettings.load()
settings.configure_logging()

load_with_limit = partial(load_records_with_preview, limit=settings.preview_limit)
view_with_limit = partial(apply_view, limit=settings.preview_limit)

# --- UI Definition ---
with gr.Blocks(title="Typed Records") as demo:
    gr.Markdown("# Typed Records Browser")
    gr.Markdown("Upload a JSON array of users, then sort and filter them by attribute path.")

    # State
    records_state = gr.State()

    with gr.Row():
        # Left Panel: Input & Controls
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Sort")
            sort_key_selector = gr.Dropdown(
                label="Sort By (dot path)",
                choices=[],
                value=None,
                allow_custom_value=True,
                interactive=True,
            )
            sort_order = gr.Radio(choices=["asc", "dsc"], value="asc", label="Order")

            gr.Markdown("### 3. Filter")
            filter_key_selector = gr.Dropdown(
                label="Search In",
                choices=[],
                value=[],
                multiselect=True,
                allow_custom_value=True,
                interactive=True,
                info="A record is kept when any selected path contains the query.",
            )
            query_input = gr.Textbox(label="Query", placeholder="case-insensitive substring")

        # Right Panel: Results
        with gr.Column(scale=2):
            gr.Markdown("### 4. Records")
            record_count = gr.Textbox(label="Record Count", interactive=False)
            records_table = gr.Dataframe(label="Records", interactive=False, wrap=True)

    load_outputs = [records_state, sort_key_selector, filter_key_selector, status_msg, records_table, record_count]
    view_inputs = [records_state, sort_key_selector, sort_order, filter_key_selector, query_input]
    view_outputs = [records_table, record_count]

    file_input.upload(fn=load_with_limit, inputs=[file_input], outputs=load_outputs)

    for control in (sort_key_selector, sort_order, filter_key_selector):
        control.change(fn=view_with_limit, inputs=view_inputs, outputs=view_outputs)
    query_input.input(fn=view_with_limit, inputs=view_inputs, outputs=view_outputs)

    if settings.sample_path:
        demo.load(fn=partial(load_with_limit, settings.sample_path), inputs=None, outputs=load_outputs)

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port, share=settings.share)
