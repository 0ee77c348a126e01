import logging
import lazyseq


logging.basicConfig(level=logging.DEBUG)

users = {
    'bobby': {'name': 'Bob', 'age': 28},
    'ann3': {'name': 'Anne', 'age': 29},
    'rob': {'name': 'Robin', 'age': 33},
}

companies = [
    {'name': 'Microsoft', 'founded': (1975, 4)},
    {'name': 'Apple', 'founded': (1976, 4)},
    {'name': 'Google', 'founded': (1998, 9)},
    {'name': 'Facebook', 'founded': (2004, 2)},
]

company_names = lazyseq.map(lambda c: c['name'], companies)
founding_years = lazyseq.map(lambda c: c['founded'][0], companies)
user_names = lazyseq.map(lambda p: p['name'], lazyseq.project_values(users))

print("first few companies:", lazyseq.collect(lazyseq.take(3, company_names)))
print("all but the two oldest:", lazyseq.collect(lazyseq.drop(2, company_names)))
print("in reverse:", lazyseq.fold_right(
    lambda acc, name: acc + " > " + name, lazyseq.take(3, company_names)))
print("founding months:", lazyseq.join(
    '/', lazyseq.map(lambda c: c['founded'][1], companies)))
print("running average founding year:", lazyseq.avg(founding_years))

ages = lazyseq.map(lambda p: p['age'], lazyseq.project_values(users))
print("ages: total {}, youngest {}, oldest {}".format(
    lazyseq.sum(ages), lazyseq.min(ages), lazyseq.max(ages)))

print("any name ending in 'le':",
      lazyseq.any(lambda name: name.endswith('le'), company_names))

history = lazyseq.zipf(
    lambda year, company, name, nick:
        '{} aka "{}" at {} in {}'.format(name, nick, company, year),
    founding_years, company_names, user_names,
    lazyseq.project_keys(users))
print("\n  ".join(["history:"] + lazyseq.collect(history)))

print("UTF-16 code units:", lazyseq.collect(lazyseq.code_units("hello\U0001F600")))


class Mood:
    default = "Calm"

    def __init__(self):
        self.bob = "Happy"
        self.anne = "Hungry"


print("fields:", lazyseq.collect(lazyseq.adapt(Mood())))
print("fields and inherited ones:",
      lazyseq.collect(lazyseq.adapt(Mood(), all_properties=True)))
print("take(3, drop(20, range())):",
      lazyseq.collect(lazyseq.take(3, lazyseq.drop(20, lazyseq.range()))))
print("4th company:", lazyseq.nth(3, company_names))
