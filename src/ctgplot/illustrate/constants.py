from colour import Color

from ..constants import GIEMSA_STAIN, Namespace

DEFAULTS = Namespace()
"""
- :term:`panel_width`
- :term:`total_target_bases`
- :term:`backbone_color`
- :term:`highlight_color`
- :term:`ribbon_stroke_color`
- :term:`band_color`
- :term:`stained_band_color`
- :term:`centromere_color`
- :term:`label_font_family`
- :term:`element_opacity`
- :term:`ribbon_stroke_opacity`
"""
DEFAULTS.add('panel_width', 1400.0, defn='The width in pixels of a single target panel')
DEFAULTS.add(
    'total_target_bases',
    None,
    defn='If given, the number of bases used to compute the plot scale instead of the laid out extent. '
    'Useful to draw many plots on the same scale',
)
DEFAULTS.add('backbone_color', '#000000', defn='The color of the target backbone and the alternate alignment lane')
DEFAULTS.add('highlight_color', '#FF0000', defn='The color of the highlighted reference regions')
DEFAULTS.add('ribbon_stroke_color', '#000000', defn='The outline color of the alignment ribbons')
DEFAULTS.add('band_color', '#AAA', defn='The color of the unstained and variable cytobands')
DEFAULTS.add('stained_band_color', '#000', defn='The color of the positively stained cytobands')
DEFAULTS.add('centromere_color', '#FF0', defn='The color of the centromeric cytobands')
DEFAULTS.add('label_font_family', 'monospace', defn='The font family of the target labels')
DEFAULTS.add('element_opacity', 0.7, defn='The opacity of all drawn elements')
DEFAULTS.add('ribbon_stroke_opacity', 0.4, defn='The opacity of the ribbon outlines')

CONTIG_PALETTE = (
    '#870098', '#00aaa5', '#3bff00', '#ec0000', '#00a2c3', '#00f400', '#ff1500', '#0092dd',
    '#00dc00', '#ff8100', '#007ddd', '#00c700', '#ffb100', '#0038dd', '#00af00', '#fcd200',
    '#0000d5', '#009a00', '#f1e700', '#0000b1', '#00a55d', '#d4f700', '#4300a2', '#00aa93',
    '#a1ff00', '#dc0000', '#00aaab', '#1dff00', '#f40000', '#009fcb', '#00ef00', '#ff2d00',
    '#008ddd', '#00d700', '#ff9900', '#0078dd', '#00c200', '#ffb900', '#0025dd', '#00aa00',
    '#f9d700', '#0000c9', '#009b13', '#efed00', '#0300aa', '#00a773', '#ccf900', '#63009e',
    '#00aa98', '#84ff00', '#e10000', '#00a7b3', '#00ff00', '#f90000', '#009bd7', '#00ea00',
    '#ff4500', '#0088dd', '#00d200', '#ffa100', '#005ddd', '#00bc00', '#ffc100', '#0013dd',
    '#00a400', '#f7dd00', '#0000c1', '#009f33', '#e8f000', '#1800a7', '#00aa88', '#c4fc00',
    '#78009b', '#00aaa0', '#67ff00', '#e60000', '#00a4bb', '#00fa00', '#fe0000', '#0098dd',
    '#00e200', '#ff5d00', '#0082dd', '#00cc00', '#ffa900', '#004bdd', '#00b400', '#ffc900',
    '#0000dd', '#009f00', '#f4e200', '#0000b9', '#00a248', '#dcf400', '#2d00a4', '#00aa8d',
    '#bcff00',
)
"""the colors assigned to query contigs, indexed by a digest of the contig name"""


class DiagramSettings:
    """
    holds settings related to colors/sizes for the drawing
    """

    def __init__(self, **kwargs):
        inputs = {}
        inputs.update(DEFAULTS.items())
        inputs.update(kwargs)
        for arg, val in inputs.items():
            if arg not in DEFAULTS:
                raise KeyError('unrecognized argument', arg)
            if arg.endswith('_color'):
                try:
                    Color(val)
                except ValueError:
                    raise ValueError('not a valid color', arg, val)
            setattr(self, arg, val)
        self.palette = CONTIG_PALETTE
        self.plot_fraction = 0.8  # fraction of the panel width used by the full layout extent

        # overview (genome-wide) tracks
        self.overview_left_margin_ratio = 0.05
        self.overview_top = -50
        self.overview_height = 200
        self.overview_label_y = 0
        self.overview_label_font_size = 6
        self.overview_backbone_y = 6
        self.overview_backbone_width = 4
        self.overview_backbone_alt_increase = 1.5  # alternating targets are drawn thicker
        self.overview_highlight_y = 3
        self.overview_ribbon_top = 10
        self.overview_ribbon_bottom = 90
        self.overview_contig_y = 95
        self.overview_contig_width = 5
        self.single_view_height = 180

        # per-target detail tracks
        self.detail_top = -25
        self.detail_height = 130
        self.detail_label_x = 0
        self.detail_label_shift = 20
        self.detail_label_font_size = 20
        self.detail_backbone_y = 6
        self.detail_track_width = 8
        self.detail_highlight_y = self.detail_backbone_y - self.detail_track_width
        self.detail_ribbon_top = 14
        self.detail_alt_target_y = self.detail_ribbon_top
        self.detail_ribbon_bottom = 88
        self.detail_contig_y = 95
        self.detail_alt_contig_y = 105
        self.detail_class = 'chr_view'

        self.highlight_width = 6
        self.ribbon_stroke_width = 0.25
        self.coordinate_precision = 4

    def cytoband_color(self, stain: str) -> str:
        """
        the backbone color of a cytoband with a given giemsa stain. All positive stains share one
        color regardless of their intensity

        Example:
            >>> DiagramSettings().cytoband_color('gpos25')
            '#000'
        """
        if stain == GIEMSA_STAIN.ACEN:
            return self.centromere_color
        if stain.startswith('gpos'):
            return self.stained_band_color
        return self.band_color
