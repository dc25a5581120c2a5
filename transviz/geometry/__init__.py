'''Planar geometry: the polygon data model and the transformations acting on it'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'
