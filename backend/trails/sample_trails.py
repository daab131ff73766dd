"""
Sample trails around San Francisco and Marin, loaded by ``manage.py seed_trails``.
Coordinates are (latitude, longitude).
"""

SAMPLE_TRAILS = [
    # San Francisco
    {
        'name': 'Golden Gate Park Loop',
        'description': 'A beautiful loop through Golden Gate Park with scenic views',
        'distance': 3.2, 'elevation': 150, 'difficulty': 'easy',
        'tags': ['scenic', 'family-friendly', 'paved'],
        'latitude': 37.7694, 'longitude': -122.4615,
    },
    {
        'name': 'Mount Davidson Trail',
        'description': 'Steep climb to the highest point in San Francisco',
        'distance': 2.1, 'elevation': 928, 'difficulty': 'moderate',
        'tags': ['scenic', 'challenging', 'views'],
        'latitude': 37.7519, 'longitude': -122.4567,
    },
    {
        'name': 'Lands End Coastal Trail',
        'description': 'Coastal trail with ocean views and historic sites',
        'distance': 4.5, 'elevation': 200, 'difficulty': 'easy',
        'tags': ['coastal', 'scenic', 'historic'],
        'latitude': 37.7849, 'longitude': -122.5118,
    },
    {
        'name': 'Twin Peaks Summit',
        'description': 'Challenging hike to the iconic Twin Peaks',
        'distance': 1.8, 'elevation': 922, 'difficulty': 'moderate',
        'tags': ['challenging', 'views', 'urban'],
        'latitude': 37.7516, 'longitude': -122.4474,
    },
    {
        'name': 'Presidio Trails',
        'description': 'Network of trails through the historic Presidio',
        'distance': 4.8, 'elevation': 300, 'difficulty': 'moderate',
        'tags': ['historic', 'forest', 'family-friendly'],
        'latitude': 37.7989, 'longitude': -122.4662,
    },
    {
        'name': 'Sutro Heights Park',
        'description': 'Historic park with ocean views and easy walking paths',
        'distance': 1.2, 'elevation': 80, 'difficulty': 'easy',
        'tags': ['historic', 'ocean-views', 'family-friendly'],
        'latitude': 37.7803, 'longitude': -122.5089,
    },
    {
        'name': 'Glen Canyon Park',
        'description': 'Hidden gem with natural trails and rock formations',
        'distance': 2.5, 'elevation': 200, 'difficulty': 'moderate',
        'tags': ['natural', 'rocky', 'hidden-gem'],
        'latitude': 37.7419, 'longitude': -122.4447,
    },
    {
        'name': 'Corona Heights Park',
        'description': 'Short but steep climb with panoramic city views',
        'distance': 0.8, 'elevation': 200, 'difficulty': 'moderate',
        'tags': ['city-views', 'steep', 'short'],
        'latitude': 37.7619, 'longitude': -122.4378,
    },
    {
        'name': 'Buena Vista Park',
        'description': 'Historic park with winding trails and city views',
        'distance': 1.5, 'elevation': 150, 'difficulty': 'easy',
        'tags': ['historic', 'city-views', 'family-friendly'],
        'latitude': 37.7689, 'longitude': -122.4397,
    },
    {
        'name': 'Bernal Heights Park',
        'description': 'Steep climb to one of the best city viewpoints',
        'distance': 1.2, 'elevation': 300, 'difficulty': 'moderate',
        'tags': ['city-views', 'steep', 'panoramic'],
        'latitude': 37.7442, 'longitude': -122.4156,
    },
    {
        'name': 'McLaren Park',
        'description': 'Large park with diverse trails and wildlife',
        'distance': 3.5, 'elevation': 250, 'difficulty': 'moderate',
        'tags': ['wildlife', 'diverse', 'large-park'],
        'latitude': 37.7289, 'longitude': -122.4206,
    },
    {
        'name': 'Fort Funston',
        'description': 'Coastal bluffs with hang gliding and dog-friendly trails',
        'distance': 2.2, 'elevation': 150, 'difficulty': 'easy',
        'tags': ['coastal', 'dog-friendly', 'hang-gliding'],
        'latitude': 37.7197, 'longitude': -122.5028,
    },
    {
        'name': 'Ocean Beach Walk',
        'description': 'Long beach walk with ocean sounds and sunset views',
        'distance': 3.5, 'elevation': 10, 'difficulty': 'easy',
        'tags': ['beach', 'ocean', 'sunset'],
        'latitude': 37.7597, 'longitude': -122.5089,
    },
    {
        'name': 'Crissy Field',
        'description': 'Flat waterfront trail with Golden Gate Bridge views',
        'distance': 2.0, 'elevation': 5, 'difficulty': 'easy',
        'tags': ['waterfront', 'bridge-views', 'flat'],
        'latitude': 37.8028, 'longitude': -122.4667,
    },
    {
        'name': 'Coit Tower Trail',
        'description': 'Steep climb to the iconic Coit Tower',
        'distance': 0.8, 'elevation': 200, 'difficulty': 'moderate',
        'tags': ['iconic', 'steep', 'tower'],
        'latitude': 37.8025, 'longitude': -122.4058,
    },
    # Marin County
    {
        'name': 'Muir Woods National Monument',
        'description': 'Famous redwood grove with easy boardwalk trails',
        'distance': 2.0, 'elevation': 100, 'difficulty': 'easy',
        'tags': ['redwoods', 'famous', 'boardwalk'],
        'latitude': 37.8958, 'longitude': -122.5814,
    },
    {
        'name': 'Mount Tamalpais East Peak',
        'description': 'Challenging climb to the highest point in Marin',
        'distance': 6.5, 'elevation': 2571, 'difficulty': 'hard',
        'tags': ['challenging', 'summit', 'views'],
        'latitude': 37.9236, 'longitude': -122.5964,
    },
    {
        'name': 'Stinson Beach to Mount Tam',
        'description': 'Epic coastal to mountain trail with diverse terrain',
        'distance': 8.2, 'elevation': 2000, 'difficulty': 'hard',
        'tags': ['epic', 'coastal', 'mountain'],
        'latitude': 37.9008, 'longitude': -122.6447,
    },
    {
        'name': 'Dipsea Trail',
        'description': 'Historic trail from Mill Valley to Stinson Beach',
        'distance': 7.4, 'elevation': 2200, 'difficulty': 'hard',
        'tags': ['historic', 'challenging', 'coastal'],
        'latitude': 37.9069, 'longitude': -122.5447,
    },
    {
        'name': 'Steep Ravine Trail',
        'description': 'Beautiful canyon trail with waterfalls and redwoods',
        'distance': 3.5, 'elevation': 800, 'difficulty': 'moderate',
        'tags': ['waterfalls', 'redwoods', 'canyon'],
        'latitude': 37.9069, 'longitude': -122.5964,
    },
    {
        'name': 'Matt Davis Trail',
        'description': 'Scenic trail with ocean views and wildflowers',
        'distance': 4.2, 'elevation': 600, 'difficulty': 'moderate',
        'tags': ['ocean-views', 'wildflowers', 'scenic'],
        'latitude': 37.9069, 'longitude': -122.6447,
    },
    {
        'name': 'Phoenix Lake Loop',
        'description': 'Easy loop around a peaceful lake',
        'distance': 2.8, 'elevation': 200, 'difficulty': 'easy',
        'tags': ['lake', 'peaceful', 'family-friendly'],
        'latitude': 37.9569, 'longitude': -122.5447,
    },
]
