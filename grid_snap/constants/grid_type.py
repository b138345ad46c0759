from enum import IntEnum

class GridType(IntEnum):
    '''
    Shape of a single grid cell, as stored by the document model.
    '''

    RECTANGULAR = 0
    ISOMETRIC = 1
