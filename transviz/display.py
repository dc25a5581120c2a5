'''Text rendering of the scaling and rotation matrices for display alongside the shape'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Literal

from .geometry.transforms.linear import build_rotation_matrix
from .parameters import TransformParams

type Markup = Literal['text', 'html']
LINE_BREAKS : dict[str, str] = {
    'text' : '\n',
    'html' : '<br>',
}


def format_matrices(params : TransformParams, markup : Markup='text') -> str:
    '''
    Render the current scaling and rotation matrices as display text

    Scale entries are shown at full precision, exactly as set, while rotation
    entries are rounded to 2 decimal places; the asymmetry is deliberate, as scale
    factors come straight from control positions whereas the trigonometric entries
    would otherwise be long transcendental tails

    Parameters
    ----------
    params : TransformParams
        The parameter snapshot to render
    markup : "text" or "html", default "text"
        Whether to break lines with newlines or wrap the result
        as an HTML fragment suitable for rich-text labels

    Returns
    -------
    str
        Both matrices, one row per line, with a blank line between them
    '''
    if markup not in LINE_BREAKS:
        raise ValueError(f'Unsupported markup "{markup}"; expected one of {tuple(LINE_BREAKS)}')
    br = LINE_BREAKS[markup]

    ((c, neg_s), (s, _)) = build_rotation_matrix(params)
    lines = [
        'Scaling Matrix:',
        f'[{float(params.scale_x)}, 0]',
        f'[0, {float(params.scale_y)}]',
        '',
        'Rotation Matrix:',
        f'[{c:.2f}, {neg_s:.2f}]',
        f'[{s:.2f}, {c:.2f}]',
    ]
    text = br.join(lines)
    if markup == 'html':
        text = f'<html>{text}</html>'

    return text
