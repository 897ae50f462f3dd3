"""Gradio-based web interface for the step-down feedback designer."""

import logging
from typing import Optional

import gradio as gr

from feedback_designer.shared.config import AppConfig
from .form_schema import TARGET_RESISTANCE, TARGET_VOLTAGE, FieldDefinition
from .gradio_adapter import CANDIDATE_COLUMNS, GradioAdapter

logger = logging.getLogger(__name__)


def _number(field: FieldDefinition) -> gr.Number:
    return gr.Number(
        label=f"{field.label} ({field.unit})",
        value=field.default,
        step=field.step,
        interactive=True,
    )


def create_app(config: Optional[AppConfig] = None, adapter: Optional[GradioAdapter] = None) -> gr.Blocks:
    adapter = adapter or GradioAdapter(config=config)
    choices = adapter.get_device_choices()
    initial_device = choices[0][1] if choices else None

    with gr.Blocks(title="Step-down Converter") as demo:
        demo.theme = gr.themes.Soft()
        gr.Markdown("# Step-down Converter")

        with gr.Row():
            # --- Left Column: Controls ---
            with gr.Column(scale=1, min_width=300):
                device_dropdown = gr.Dropdown(
                    choices=choices,
                    value=initial_device,
                    label="Device",
                    type="value",
                    interactive=True,
                )
                device_md = gr.Markdown(adapter.describe_device(initial_device))
                voltage_input = _number(TARGET_VOLTAGE)
                resistance_input = _number(TARGET_RESISTANCE)
                btn_calc = gr.Button("Solve", variant="primary", size="lg")

            # --- Right Column: Results ---
            with gr.Column(scale=2):
                result_md = gr.Markdown("Enter a target voltage and feedback resistance.")
                candidates_df = gr.Dataframe(
                    headers=CANDIDATE_COLUMNS,
                    interactive=False,
                    wrap=True,
                    label="Best candidates",
                )
                design_code = gr.Code(
                    label="KiCad design (copy and paste into the schematic editor)",
                    interactive=False,
                )

        device_dropdown.change(
            fn=adapter.describe_device,
            inputs=[device_dropdown],
            outputs=[device_md],
        )

        gr.on(
            triggers=[
                btn_calc.click,
                device_dropdown.change,
                voltage_input.change,
                resistance_input.change,
                demo.load,
            ],
            fn=adapter.run_design,
            inputs=[device_dropdown, voltage_input, resistance_input],
            outputs=[result_md, candidates_df, design_code],
        )

    return demo
