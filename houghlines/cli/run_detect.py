import typer
from omegaconf import OmegaConf
from pathlib import Path
from typing import List, Optional
from houghlines.config.loader import load_cfg, params_from_cfg
from houghlines.cv.lines_hough import detect_lines
from houghlines.errors import HoughError
from houghlines.schema.serialization import export_lines_csv, lines_summary
from houghlines.utils.image import load_rgb, save_grey, save_rgb
from houghlines.utils.io import write_json, write_yaml
from houghlines.utils.logging import setup_logging
from houghlines.utils.timers import timer

app = typer.Typer(add_completion=False)

@app.command()
def run(input: str = typer.Argument(..., help="Image to scan (any format Pillow reads)."),
        hough_out: Optional[str] = typer.Option(None, "--hough-out", help="Greyscale Hough-space PNG."),
        lines_out: Optional[str] = typer.Option(None, "--lines-out", help="Input image with detected lines drawn."),
        csv_out: Optional[str] = typer.Option(None, "--csv-out", help="Per-line table."),
        json_out: Optional[str] = typer.Option(None, "--json-out", help="Run summary; '-' for stdout."),
        config: Optional[str] = typer.Option(None, "--config", help="YAML overlay on the defaults."),
        set_: List[str] = typer.Option([], "--set", help="Dotlist override, e.g. hough.houghspace_filter_threshold=40"),
        theta_scale: Optional[int] = typer.Option(None, "--theta-scale", help="theta_axis_scale_factor"),
        rho_scale: Optional[int] = typer.Option(None, "--rho-scale", help="rho_axis_scale_factor"),
        threshold: Optional[int] = typer.Option(None, "--threshold", help="houghspace_filter_threshold"),
        dump_config: Optional[str] = typer.Option(None, "--dump-config", help="Write the effective config as YAML.")):
    overrides = list(set_)
    if theta_scale is not None: overrides.append(f"hough.theta_axis_scale_factor={theta_scale}")
    if rho_scale is not None: overrides.append(f"hough.rho_axis_scale_factor={rho_scale}")
    if threshold is not None: overrides.append(f"hough.houghspace_filter_threshold={threshold}")

    try:
        cfg = load_cfg(config, overrides)
        log = setup_logging(cfg.logging.level)
        params = params_from_cfg(cfg)
    except HoughError as e:
        log = setup_logging()
        log.error(f"[detect] invalid configuration: {e}")
        raise typer.Exit(code=2)
    if params.edge_mode == "dark" and params.edge_threshold != 1:
        log.warning(f"[detect] edges.threshold={params.edge_threshold}: votes from pixels darker "
                    f"than {params.edge_threshold}, not only pure black")
    if dump_config:
        write_yaml(OmegaConf.to_container(cfg, resolve=True), dump_config)

    in_path = Path(input)
    out_root = Path(cfg.paths.output_root)
    hough_out = hough_out or str(out_root / f"{in_path.stem}_hough.png")
    lines_out = lines_out or str(out_root / f"{in_path.stem}_lines.png")

    pixels = load_rgb(in_path)
    log.info(f"[detect] {in_path} {pixels.shape[1]}x{pixels.shape[0]}")
    try:
        with timer("detect_lines"):
            result = detect_lines(pixels, params)
    except HoughError as e:
        log.error(f"[detect] {e.__class__.__name__}: {e}")
        raise typer.Exit(code=1)

    save_grey(result.hough_image(), hough_out)
    overlay = result.overlay(pixels, color=list(cfg.render.color), antialias=bool(cfg.render.antialias))
    save_rgb(overlay, lines_out)
    log.info(f"[detect] hough space → {hough_out}; overlay → {lines_out}")

    if csv_out:
        log.info(f"[detect] lines table → {export_lines_csv(result, csv_out)}")
    if json_out:
        write_json(lines_summary(result, params), json_out)

if __name__ == "__main__":
    app()
