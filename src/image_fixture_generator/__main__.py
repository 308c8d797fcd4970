from image_fixture_generator.cli import main

main()
