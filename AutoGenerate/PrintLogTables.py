from ExpLog.ConstantTables import generateTables
from ExpLog.common.constants import TABLE_SIZE
from ExpLog.common.constants import TABLE_LIMIT


tables = generateTables(TABLE_SIZE, TABLE_LIMIT)


len1 = len(str(TABLE_SIZE - 1))
len2 = 2 + 16


for name, table in [('POSITIVE_STEP_TABLE', tables.positive), ('NEGATIVE_STEP_TABLE', tables.negative)]:
    print('{} = ('.format(name))
    for index in range(len(table)):
        print('    {0:#0{1}x}, # {2:{3}d}'.format(table[index], len2, index, len1))
    print(')')
    print('')
    print('')
