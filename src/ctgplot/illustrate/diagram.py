"""
This is the primary module responsible for generating svg visualizations

"""
from typing import Optional

from svgwrite import Drawing

from ..assign import PrimaryAssignment
from ..constants import DETAIL_MAGNIFICATION, OUTPUT_FORMAT
from ..layout import Layout
from ..records import RecordStore
from ..types import Cytobands, HighlightRegions
from ..util import logger
from .elements import draw_overview_block, draw_target_detail
from .projection import scaling_factor
from .util import element_id

ZOOM_SCRIPT = r"""
<script>
document.addEventListener('readystatechange', event => {
    if (event.target.readyState === "complete") {
        var views = document.getElementsByClassName("chr_view");
        for (let i = 0; i < views.length; i++) {
            views[i].addEventListener('mousedown', function(event) {
                event.preventDefault();
                if (event.button != 0) {
                    return;
                }
                const viewBoxValues = views[i].getAttribute('viewBox').split(' ').map(val => parseFloat(val));
                let viewBox = { x: viewBoxValues[0], y: viewBoxValues[1], width: viewBoxValues[2], height: viewBoxValues[3] };
                let scalingFactor = event.altKey ? 1.25 : 0.8;
                viewBox.width *= scalingFactor;
                views[i].setAttribute('viewBox', `${viewBox.x} ${viewBox.y} ${viewBox.width} ${viewBox.height}`);
            });
        };
    }
});
</script>
"""

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8" ?>'


def draw_alignment_plot(
    config,
    store: RecordStore,
    assignment: PrimaryAssignment,
    layout: Layout,
    cytobands: Optional[Cytobands] = None,
    highlights: Optional[HighlightRegions] = None,
) -> Drawing:
    """
    this is the main drawing function. It draws the genome-wide overview of all laid out
    targets followed by one detail view per target

    The overview is skipped when a single target is selected, and the detail views are
    skipped when only the summary is requested

    Args:
        config (DiagramSettings): the drawing settings
        store: the alignment records and length tables
        assignment: the primary assignment of the query contigs
        layout: the target blocks to draw
        cytobands: bands by target name, used to draw banded backbones in the detail views
        highlights: regions by target name, drawn on both the overview and the detail views

    Returns:
        svgwrite.drawing.Drawing: the complete drawing
    """
    if not layout.blocks:
        raise AssertionError('nothing to draw')
    cytobands = {} if cytobands is None else cytobands
    highlights = {} if highlights is None else highlights

    total_extent = config.total_target_bases if config.total_target_bases else layout.total_extent
    scale = scaling_factor(config.panel_width, total_extent, config.plot_fraction)
    # a single selected target already fills the panel
    detail_scale = scale if layout.target_filter is not None else scale * DETAIL_MAGNIFICATION
    logger.info(f'drawing scale: {scale:.3e} px/base (detail views: {detail_scale:.3e} px/base)')

    detail_blocks = list(layout.blocks) if layout.show_details else []
    y = config.overview_height if layout.show_overview else 0
    height = max(
        config.single_view_height,
        y + len(detail_blocks) * config.detail_height - config.overview_top,
    )
    canvas = Drawing(
        size=(config.panel_width * 2, height),
        id='WholeGenomeViewer',
        overflow='visible',
        preserveAspectRatio='none',
    )
    canvas.viewbox(
        -config.panel_width * config.overview_left_margin_ratio,
        config.overview_top,
        config.panel_width * (1 - config.overview_left_margin_ratio) * 2,
        height,
    )

    if layout.show_overview:
        for block in layout.blocks:
            canvas.add(draw_overview_block(
                config, canvas, store, block, scale, highlights=highlights.get(block.name)
            ))

    for block in detail_blocks:
        group = draw_target_detail(
            config, canvas, store, assignment, block, detail_scale,
            cytobands=cytobands.get(block.name),
            highlights=highlights.get(block.name),
        )
        sub_canvas = canvas.svg(
            insert=(0, y),
            size=(config.panel_width, config.detail_height),
            id=element_id(block.name),
            class_=config.detail_class,
            overflow='visible',
            preserveAspectRatio='none',
        )
        sub_canvas.viewbox(0, config.detail_top, config.panel_width, config.detail_height)
        sub_canvas.add(group)
        canvas.add(canvas.text(
            block.name,
            insert=(config.detail_label_x, y + config.detail_label_shift),
            font_size='{}px'.format(config.detail_label_font_size),
            font_family=config.label_font_family,
        ))
        canvas.add(sub_canvas)
        y += config.detail_height
    logger.info(f'drew {len(layout.blocks) if layout.show_overview else 0} overview and {len(detail_blocks)} detail views')
    return canvas


def render_document(canvas: Drawing, output_format: str = OUTPUT_FORMAT.HTML) -> str:
    """
    serialize a drawing as a standalone svg document or as an html page with the zoom script

    Args:
        canvas: the drawing
        output_format: one of the :attr:`~ctgplot.constants.OUTPUT_FORMAT` values
    """
    OUTPUT_FORMAT.enforce(output_format)
    svg = canvas.tostring()
    if output_format == OUTPUT_FORMAT.SVG:
        return '\n'.join([XML_DECLARATION, svg, ''])
    return '\n'.join([
        '<html><body>',
        ZOOM_SCRIPT,
        '<div style="overflow:scroll;">',
        svg,
        '</div></body></html>',
        '',
    ])
