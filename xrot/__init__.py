from xrot.version import __version__

__author__ = 'Niclas Rieger'
__email__ = 'niclasrieger@gmail.com'
