"""
Contentful GraphQL queries for the lesson pages
"""

_FILE_FIELDS = """
          items {
            title
            fileName
            url
          }
"""

QUERY_COURSE_INFORMATION = """
query CourseInformation($courseSlug: String!) {
  courseModuleCollection(where: { slug: $courseSlug }, limit: 1) {
    items {
      title
      slug
      description
      level
      language
      githubUrl
      sectionsCollection {
        total
      }
    }
  }
}
"""

QUERY_SECTION_INFORMATION = """
query SectionInformation($courseSlug: String!, $sectionIndex: Int!) {
  courseModuleCollection(where: { slug: $courseSlug }, limit: 1) {
    items {
      sectionsCollection(skip: $sectionIndex, limit: 1) {
        items {
          title
          description
          lessonsCollection {
            total
          }
        }
      }
    }
  }
}
"""

QUERY_ALL_SECTIONS = """
query AllSections($courseSlug: String!) {
  courseModuleCollection(where: { slug: $courseSlug }, limit: 1) {
    items {
      sectionsCollection {
        items {
          title
          lessonsCollection {
            items {
              title
            }
          }
        }
      }
    }
  }
}
"""

QUERY_LESSON_INFORMATION = """
query LessonInformation($courseSlug: String!, $sectionIndex: Int!, $lessonIndex: Int!) {
  courseModuleCollection(where: { slug: $courseSlug }, limit: 1) {
    items {
      sectionsCollection(skip: $sectionIndex, limit: 1) {
        items {
          lessonsCollection(skip: $lessonIndex, limit: 1) {
            items {
              title
              slug
              content
              files {
                sourceCollection {%s        }
                templateCollection {%s        }
                solutionCollection {%s        }
              }
            }
          }
        }
      }
    }
  }
}
""" % (_FILE_FIELDS, _FILE_FIELDS, _FILE_FIELDS)
