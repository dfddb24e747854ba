# src/matchtrace/visualization/graphviz_renderer.py

import html
import shutil
import subprocess


def render_dot_to_svg(dot_source: str, engine: str = "dot", timeout: float = 10.0) -> str:
    """
    Renders DOT source to SVG XML with the system Graphviz executable.
    Failures come back as a small SVG carrying the error text, so the page
    still has something to show.
    """
    if not shutil.which(engine):
        return _create_error_svg(f"GraphViz '{engine}' executable not found in PATH.")

    try:
        process = subprocess.run(
            [engine, "-Tsvg"],
            input=dot_source,
            capture_output=True,
            text=True,
            check=True,
            encoding="utf-8",
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        return _create_error_svg(f"GraphViz Error: {e.stderr}")
    except subprocess.TimeoutExpired:
        return _create_error_svg(f"GraphViz timed out after {timeout:g}s")
    return process.stdout


def _create_error_svg(msg: str) -> str:
    return f'''
    <svg width="400" height="100" xmlns="http://www.w3.org/2000/svg">
      <rect width="100%" height="100%" fill="#fee"/>
      <text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" fill="red" font-family="monospace">
        {html.escape(msg)}
      </text>
    </svg>
    '''
