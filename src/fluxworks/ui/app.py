"""Gradio UI for Fluxworks."""

import logging

import gradio as gr

from fluxworks.core.config import config

from .bindings import bind_events, build_event_table
from .models import DOWNLOAD_LABEL, GENERATE_LABEL, IDLE_PLACEHOLDER, MAX_SEED, UIState
from .state import cleanup_ui_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Interval of the timer that re-syncs the notification region with the session
NOTICE_REFRESH_SECONDS = 0.5

CUSTOM_CSS = """
#message-container .error-message {
    background: #fee2e2;
    color: #991b1b;
    border-radius: 6px;
    padding: 10px 14px;
    margin-bottom: 8px;
}
#message-container .success-message {
    background: #dcfce7;
    color: #166534;
    border-radius: 6px;
    padding: 10px 14px;
    margin-bottom: 8px;
    animation-name: notice-fade;
    animation-timing-function: ease;
    animation-fill-mode: forwards;
}
@keyframes notice-fade {
    from { opacity: 1; }
    to { opacity: 0; }
}
.placeholder {
    text-align: center;
    padding: 48px 12px;
    color: #6b7280;
}
#generate-btn.loading {
    opacity: 0.7;
    cursor: wait;
}
@keyframes pulse {
    0% { transform: scale(1); }
    50% { transform: scale(1.02); }
    100% { transform: scale(1); }
}
#prompt.pulse textarea {
    animation: pulse 0.5s;
}
"""

# Double-click on the prompt picks an example, Ctrl+Enter generates,
# success notices are removed once their fade animation ends
PAGE_SCRIPT = """
<script>
(function () {
  function pulse() {
    const field = document.querySelector('#prompt');
    if (!field) { return; }
    field.classList.add('pulse');
    setTimeout(() => field.classList.remove('pulse'), 500);
  }
  window.fluxworksPulse = pulse;

  document.addEventListener('animationend', (event) => {
    if (event.animationName === 'notice-fade') { event.target.remove(); }
  });

  function wire() {
    const prompt = document.querySelector('#prompt textarea');
    if (!prompt) { setTimeout(wire, 250); return; }
    prompt.addEventListener('dblclick', () => {
      const button = document.querySelector('#example-btn');
      if (button) { button.click(); }
    });
    prompt.addEventListener('keydown', (event) => {
      if (event.key === 'Enter' && event.ctrlKey) {
        event.preventDefault();
        const button = document.querySelector('#generate-btn');
        if (button) { button.click(); }
      }
    });
  }
  window.addEventListener('load', wire);
})();
</script>
"""


def create_ui() -> tuple[gr.Blocks, str, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string, page head script)
    """
    app = gr.Blocks(title=f"Fluxworks - {config.model_name} Image Generator")

    with app:
        # Session state - one instance per page load
        ui_state = gr.State(UIState(), delete_callback=cleanup_ui_state)

        # Browser storage for the API token
        token_store = gr.BrowserState(
            "",
            storage_key=config.token_storage_key,
            secret=config.browser_state_secret,
        )
        token_confirmed = gr.State(False)
        notice_timer = gr.Timer(NOTICE_REFRESH_SECONDS)

        gr.Markdown(
            f"""
            # Fluxworks
            ### Text-to-image with {config.model_name} on the Hugging Face Inference API
            """
        )

        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### Generation Settings")

                token_input = gr.Textbox(
                    label="Hugging Face API Token",
                    placeholder="hf_...",
                    type="password",
                    elem_id="api-key",
                )

                prompt_input = gr.Textbox(
                    label="Prompt",
                    placeholder="Describe the image you want to generate...",
                    lines=4,
                    elem_id="prompt",
                    info="Double-click for an example prompt, Ctrl+Enter to generate",
                )
                example_btn = gr.Button(
                    "🎲 Example",
                    variant="secondary",
                    size="sm",
                    elem_id="example-btn",
                )

                with gr.Row():
                    width_slider = gr.Slider(
                        minimum=256,
                        maximum=2048,
                        step=64,
                        value=config.default_width,
                        label="Width",
                    )
                    height_slider = gr.Slider(
                        minimum=256,
                        maximum=2048,
                        step=64,
                        value=config.default_height,
                        label="Height",
                    )

                steps_slider = gr.Slider(
                    minimum=1,
                    maximum=50,
                    step=1,
                    value=config.default_steps,
                    label="Inference Steps",
                    info=f"{config.model_name} works best with 4 steps",
                )

                seed_input = gr.Textbox(
                    label="Seed",
                    placeholder="Leave empty for a random seed",
                    info=f"Whole number from 0 to {MAX_SEED}",
                )

                generate_btn = gr.Button(
                    GENERATE_LABEL,
                    variant="primary",
                    size="lg",
                    elem_id="generate-btn",
                )

            with gr.Column(scale=1):
                gr.Markdown("### Generated Image")

                image_status = gr.Markdown(
                    value=IDLE_PLACEHOLDER,
                    elem_classes="placeholder",
                )
                image_output = gr.Image(
                    label="Output",
                    type="filepath",
                    interactive=False,
                    visible=False,
                )
                download_btn = gr.DownloadButton(
                    DOWNLOAD_LABEL,
                    visible=False,
                    elem_classes="download-btn",
                )
                notices = gr.HTML(value="", elem_id="message-container")

        gr.Markdown(
            f"""
            ---
            **Model:** {config.model_name} | **Endpoint:** {config.inference_url}

            *Images saved to: {config.outputs_dir}*
            """
        )

        components = {
            "app": app,
            "state": ui_state,
            "token_store": token_store,
            "token_confirmed": token_confirmed,
            "timer": notice_timer,
            "token": token_input,
            "prompt": prompt_input,
            "example_btn": example_btn,
            "width": width_slider,
            "height": height_slider,
            "steps": steps_slider,
            "seed": seed_input,
            "generate_btn": generate_btn,
            "image_status": image_status,
            "image": image_output,
            "download": download_btn,
            "notices": notices,
        }
        bind_events(components, build_event_table())

    return app, CUSTOM_CSS, PAGE_SCRIPT


def main():
    """Main entry point for the application."""
    logger.info(f"Starting Fluxworks ({config.model_name})...")
    logger.info(f"Configuration: {config.model_dump(exclude={'browser_state_secret'})}")

    app, custom_css, page_script = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")
    logger.info("Double-click the prompt field to see an example")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
        head=page_script,
        allowed_paths=[str(config.outputs_dir)],
    )


if __name__ == "__main__":
    main()
