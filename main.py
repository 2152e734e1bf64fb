import argparse
import logging
from roadmap.config import load_config
from roadmap.pipeline import TimelinePipeline
from ui.gradio_app import launch_ui

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML config file")
    parser.add_argument("--view", choices=["timeline", "grouped"], help="Override the page variant")
    args = parser.parse_args()

    cfg = load_config(args.config)
    if args.view:
        cfg = cfg.model_copy(update={"view": args.view})

    logging.basicConfig(
        level=getattr(logging, cfg.logging.level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    log = logging.getLogger("main")
    log.info(f"Serving the {cfg.view} view (parse policy: {cfg.effective_parse_policy})")

    # 1) Pipeline validates its sources once, up front
    pipeline = TimelinePipeline(cfg)

    # 2) Launch UI
    launch_ui(pipeline)

if __name__ == "__main__":
    main()
