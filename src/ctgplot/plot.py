import os
from typing import Optional

from . import util as _util
from .assign import resolve_primary_assignment
from .constants import OUTPUT_FORMAT
from .file_io import load_ctgmap, load_cytobands, load_highlight_regions
from .illustrate.constants import DiagramSettings
from .illustrate.diagram import draw_alignment_plot, render_document
from .layout import plan_layout


def output_filename(output_prefix: str, output_format: str) -> str:
    """
    the output file name, the extension of the prefix (if any) is replaced by the format

    Example:
        >>> output_filename('plots/sample.v1', 'svg')
        'plots/sample.svg'
    """
    return os.path.splitext(output_prefix)[0] + '.' + OUTPUT_FORMAT.enforce(output_format)


def main(
    ctgmap_json: str,
    output_prefix: str,
    output_format: str = OUTPUT_FORMAT.HTML,
    target: Optional[str] = None,
    cytoband_file: Optional[str] = None,
    ref_annotation_bed: Optional[str] = None,
    **kwargs,
) -> str:
    """
    generates the alignment plot of a set of contig to reference alignments

    Args:
        ctgmap_json: path to the json file of alignment records and sequence lengths
        output_prefix: the output file name, without the extension
        output_format: write a bare svg document or an html page with zoom controls
        target: only draw this target. The special value 'summary' draws only the genome-wide overview
        cytoband_file: cytobands used to draw the target backbones
        ref_annotation_bed: bed file of target regions to highlight
        kwargs: overrides of the drawing settings (see :class:`~ctgplot.illustrate.constants.DiagramSettings`)

    Returns:
        the path of the file written
    """
    settings = DiagramSettings(**kwargs)
    store = load_ctgmap(ctgmap_json)
    cytobands = load_cytobands(cytoband_file) if cytoband_file else None
    highlights = load_highlight_regions(ref_annotation_bed) if ref_annotation_bed else None

    assignment = resolve_primary_assignment(store)
    layout = plan_layout(store, assignment, target_filter=target)
    canvas = draw_alignment_plot(settings, store, assignment, layout, cytobands=cytobands, highlights=highlights)
    # the output file is only opened once the document is complete
    content = render_document(canvas, output_format)

    output_file = output_filename(output_prefix, output_format)
    if os.path.dirname(output_file) and not os.path.isdir(os.path.dirname(output_file)):
        _util.mkdirp(os.path.dirname(output_file))
    _util.logger.info(f'writing: {output_file}')
    with open(output_file, 'w') as fh:
        fh.write(content)
    return output_file
