"""
Builds the svg groups for the genome-wide overview and the per-target detail views
"""
from typing import List, Optional, Tuple

from ..assign import PrimaryAssignment
from ..constants import NOT_APPLICABLE
from ..layout import LayoutBlock
from ..records import RecordStore
from ..types import Cytoband
from .projection import (
    Ribbon,
    contig_color,
    generate_ribbons,
    place_contigs,
    project_alternate_interval,
    scaled_interval,
)
from .util import Tag, element_id, line_path, polygon_path


def draw_track_line(config, canvas, start, end, y, color, width, title=None, class_=None):
    """
    generates a horizontal line element (backbones, highlights and alignment lanes)
    """
    attrs = {}
    if class_:
        attrs['class_'] = class_
    path = canvas.path(
        d=line_path(start, end, y, config.coordinate_precision),
        stroke=color,
        stroke_width=width,
        opacity=config.element_opacity,
        stroke_opacity=config.element_opacity,
        **attrs
    )
    if title is not None:
        path.add(Tag('title', title))
    return path


def draw_ribbon(config, canvas, ribbon: Ribbon, top: float, bottom: float, title=None):
    """
    generates the filled quadrilateral joining the target interval (top) to the query interval (bottom)
    """
    path = canvas.path(
        d=polygon_path(ribbon.points(top, bottom), config.coordinate_precision),
        fill=ribbon.color,
        stroke=config.ribbon_stroke_color,
        stroke_width=config.ribbon_stroke_width,
        opacity=config.element_opacity,
        stroke_opacity=config.ribbon_stroke_opacity,
        class_='ribbon',
    )
    if title is not None:
        path.add(Tag('title', title))
    return path


def ribbon_title(ribbon: Ribbon) -> str:
    record = ribbon.record
    return '{}:{}-{} @ {}:{}-{} {}:{}:{}'.format(
        record.t_name, record.ts, record.te,
        record.q_name, record.qs, record.qe,
        record.strand_symbol, int(record.t_dup), int(record.q_dup),
    )


def draw_highlights(config, canvas, regions: List[Tuple[int, int]], offset, scale, y, titles=False):
    """
    Returns:
        List: the line elements marking each highlighted region
    """
    elements = []
    for start, end in regions:
        s, t = scaled_interval(start, end, offset, scale)
        elements.append(draw_track_line(
            config, canvas, s, t, y, config.highlight_color, config.highlight_width,
            title='{}-{}'.format(start, end) if titles else None,
            class_='highlight',
        ))
    return elements


def draw_cytoband_backbone(config, canvas, bands: List[Cytoband], offset, scale, y):
    """
    Creates the banded backbone of a target from its cytobands

    Return:
        svgwrite.container.Group: the group element for the bands
    """
    group = canvas.g(class_='cytoband')
    for band in bands:
        s, t = scaled_interval(band.start, band.end, offset, scale)
        group.add(draw_track_line(
            config, canvas, s, t, y, config.cytoband_color(band.stain), config.detail_track_width, title=band.name
        ))
    return group


def draw_overview_block(config, canvas, store: RecordStore, block: LayoutBlock, scale, highlights=None):
    """
    Creates the overview illustration of a single target block: the target backbone and label,
    the highlighted regions, the primary query contigs and the ribbons joining them

    Args:
        config (DiagramSettings): the drawing settings
        canvas (svgwrite.drawing.Drawing): the main svgwrite object used to create new svg elements
        store: the alignment records and length tables
        block: the target block to draw
        scale: the number of drawing units per base
        highlights: highlighted regions on this target

    Return:
        svgwrite.container.Group: the group element for the block
    """
    group = canvas.g(id=element_id(block.name, 'overview_'))
    start, end = scaled_interval(0, block.length, block.offset, scale)
    width = config.overview_backbone_width + ((block.id + 1) % 2) * config.overview_backbone_alt_increase
    group.add(draw_track_line(
        config, canvas, start, end, config.overview_backbone_y, config.backbone_color, width, class_='backbone'
    ))
    group.add(canvas.text(
        block.name,
        insert=(start, config.overview_label_y),
        font_size='{}px'.format(config.overview_label_font_size),
        font_family=config.label_font_family,
    ))
    for element in draw_highlights(
        config, canvas, highlights or [], block.offset, scale, config.overview_highlight_y
    ):
        group.add(element)

    placements = place_contigs(store, block.records)
    for placement in placements.values():
        s, t = scaled_interval(placement.offset, placement.offset + placement.length, block.offset, scale)
        group.add(draw_track_line(
            config, canvas, s, t, config.overview_contig_y,
            contig_color(placement.q_name, config.palette), config.overview_contig_width,
            class_='contig',
        ))

    for ribbon in generate_ribbons(store, block.records, placements, block.offset, scale, config.palette):
        group.add(draw_ribbon(config, canvas, ribbon, config.overview_ribbon_top, config.overview_ribbon_bottom))
    return group


def draw_target_detail(
    config,
    canvas,
    store: RecordStore,
    assignment: PrimaryAssignment,
    block: LayoutBlock,
    scale,
    cytobands: Optional[List[Cytoband]] = None,
    highlights: Optional[List[Tuple[int, int]]] = None,
):
    """
    Creates the detail illustration of a single target, drawn from its own origin

    Besides the primary contigs and their ribbons, the detail view shows the alignments of
    contigs placed on other targets against this target (under the backbone) and the alignments
    of the contigs placed here against other targets (under each contig)

    Args:
        config (DiagramSettings): the drawing settings
        canvas (svgwrite.drawing.Drawing): the main svgwrite object used to create new svg elements
        store: the alignment records and length tables
        assignment: the primary assignment, used to look up the alternate alignments
        block: the target block to draw
        scale: the number of drawing units per base
        cytobands: the bands of the target. A plain backbone is drawn when not given
        highlights: highlighted regions on this target

    Return:
        svgwrite.container.Group: the group element for the target
    """
    group = canvas.g(class_='target_detail')
    offset = 0.0

    if cytobands:
        group.add(draw_cytoband_backbone(config, canvas, cytobands, offset, scale, config.detail_backbone_y))
    else:
        start, end = scaled_interval(0, block.length, offset, scale)
        group.add(draw_track_line(
            config, canvas, start, end, config.detail_backbone_y, config.backbone_color,
            config.detail_track_width, class_='backbone',
        ))

    for element in draw_highlights(
        config, canvas, highlights or [], offset, scale, config.detail_highlight_y, titles=True
    ):
        group.add(element)

    # alignments of contigs placed elsewhere, on the target side
    for record in assignment.alt_records_by_target.get(block.name, []):
        s, t = scaled_interval(record.ts, record.te, offset, scale)
        q_target = assignment.primary_target(record.q_name) or NOT_APPLICABLE
        group.add(draw_track_line(
            config, canvas, s, t, config.detail_alt_target_y, config.backbone_color, config.detail_track_width,
            title='{} to {} with {}:{}-{}'.format(record.t_name, q_target, record.q_name, record.qs, record.qe),
            class_='alt_target',
        ))

    placements = place_contigs(store, block.records)
    for placement in placements.values():
        color = contig_color(placement.q_name, config.palette)
        s, t = scaled_interval(placement.offset, placement.offset + placement.length, offset, scale)
        group.add(draw_track_line(
            config, canvas, s, t, config.detail_contig_y, color, config.detail_track_width,
            title=placement.q_name, class_='contig',
        ))
        # alignments of this contig against other targets, on the query side
        for record in assignment.alt_records_by_query.get(placement.q_name, []):
            qs, qe = project_alternate_interval(record, placement.length, placement.ctg_orientation)
            s, t = scaled_interval(qs, qe, offset + placement.offset, scale)
            group.add(draw_track_line(
                config, canvas, s, t, config.detail_alt_contig_y, color, config.detail_track_width,
                title='{}@{}:{}-{}'.format(record.q_name, record.t_name, record.ts, record.te),
                class_='alt_query',
            ))

    for ribbon in generate_ribbons(store, block.records, placements, offset, scale, config.palette):
        group.add(draw_ribbon(
            config, canvas, ribbon, config.detail_ribbon_top, config.detail_ribbon_bottom, title=ribbon_title(ribbon)
        ))
    return group
