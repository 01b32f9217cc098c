from prettytable import PrettyTable

TITLES = ['Type', 'Scope', 'Description', 'Body', 'Valid']


def build_table(parsed, body, valid):
    table = PrettyTable(TITLES)
    table.align = 'l'
    table.add_row([parsed.type, parsed.scope, parsed.description, body, valid])
    return table


def render_report(parsed, body, valid):
    return build_table(parsed, body, valid).get_string()
